"""
Shared record contracts for the flyweight registry.

A :class:`SharedRecord` carries *intrinsic* state: the fields that are identical
across every use of the record and therefore define its identity. Concrete
record types subclass it and declare their defining fields; every field is
required and scalar (str, int, float, bool).

A :class:`Placement` carries *extrinsic* state: the per-use data (here, grid
coordinates) that the caller supplies and that is never deduplicated. It holds
a non-owning reference to the shared record.

Design Notes
------------
- **Immutability**: records are frozen Pydantic v2 models; placements are
  frozen dataclasses. Neither can change after construction.
- **Identity**: the registry guarantees one record instance per key, so
  ``placement_a.record is placement_b.record`` is the sharing test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

Scalar = str | int | float | bool
SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool)


class SharedRecord(BaseModel):
    """Base envelope for immutable, deduplicated value records."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True, allow_inf_nan=False)

    kind: ClassVar[str] = "record"

    @classmethod
    def key_fields(cls) -> tuple[str, ...]:
        """Return the defining field names in declaration order."""
        return tuple(cls.model_fields)


class TreeType(SharedRecord):
    """Intrinsic state of a tree species as drawn in a forest."""

    kind: ClassVar[str] = "tree"

    name: str = Field(description="Species name, e.g. 'Oak'")
    color: str = Field(description="Foliage color")
    texture: str = Field(description="Bark texture")

    def describe(self, x: int, y: int) -> str:
        """Return the display line for this tree type placed at ``(x, y)``."""
        return (
            f"Displaying '{self.name}' tree at ({x}, {y}) "
            f"with color {self.color} and texture {self.texture}."
        )


@dataclass(frozen=True, slots=True)
class Placement:
    """
    One use of a shared record at a position.

    Attributes
    ----------
    x, y : int
        Extrinsic coordinates supplied by the caller.
    record : TreeType
        Shared intrinsic state, owned by the registry that produced it.
    """

    x: int
    y: int
    record: TreeType

    def describe(self) -> str:
        return self.record.describe(self.x, self.y)


__all__ = ["Scalar", "SCALAR_TYPES", "SharedRecord", "TreeType", "Placement"]
