"""Forest: a context that places many trees while sharing their tree types."""

from __future__ import annotations

from typing import Any

from .records import Placement, TreeType
from .registry import SharedRegistry


class Forest:
    """
    Collection of tree placements backed by a :class:`SharedRegistry`.

    Each placement stores only its coordinates plus a reference to a shared
    :class:`TreeType`; planting the same species twice allocates no new type.
    Pass ``registry`` to share tree types between several forests.
    """

    __slots__ = ("_registry", "_placements")

    def __init__(self, registry: SharedRegistry[TreeType] | None = None) -> None:
        self._registry: SharedRegistry[TreeType] = (
            registry if registry is not None else SharedRegistry(TreeType)
        )
        self._placements: list[Placement] = []

    @property
    def registry(self) -> SharedRegistry[TreeType]:
        return self._registry

    def plant(self, x: int, y: int, **fields: Any) -> Placement:
        """Place a tree of the type described by ``fields`` at ``(x, y)``."""
        tree_type = self._registry.get_or_create(**fields)
        placement = Placement(x=x, y=y, record=tree_type)
        self._placements.append(placement)
        return placement

    def placements(self) -> tuple[Placement, ...]:
        return tuple(self._placements)

    def render(self) -> list[str]:
        """Return one display line per placement, in planting order."""
        return [p.describe() for p in self._placements]

    def __len__(self) -> int:
        return len(self._placements)


__all__ = ["Forest"]
