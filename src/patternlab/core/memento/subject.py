"""
Subjects (originators) that can save and restore their state.

Two concrete subjects are provided:

- :class:`TextEditor`: a single text buffer.
- :class:`StateBoard`: a key-value board with a revision counter, whose state
  is a composite dict and therefore needs a deep copy on save.

Provenance policy
-----------------
Every subject has an opaque ``subject_id`` that is stamped into each snapshot
it produces. By default ``restore`` accepts any snapshot of a compatible shape,
whichever subject produced it. A subject built with ``strict=True`` (or, when
``strict`` is omitted, with ``PATTERNLAB_STRICT_RESTORE`` set) rejects foreign
snapshots with :class:`ForeignSnapshot` and keeps its current state.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, cast, runtime_checkable

from patternlab.core.errors import ForeignSnapshot
from patternlab.core.settings import get_logger, load_settings

from .snapshot import Snapshot

S = TypeVar("S")
T = TypeVar("T")

logger = get_logger("patternlab.memento")


@runtime_checkable
class Originator(Protocol[S]):
    """Anything that can produce and consume snapshots of its own state."""

    def save(self, note: str | None = None) -> Snapshot[S]: ...

    def restore(self, snapshot: Snapshot[S]) -> None: ...


class Subject(ABC, Generic[S]):
    """
    Base class implementing save/restore around two state hooks.

    Subclasses implement ``_capture_state`` (return the live state; the base
    class deep-copies it) and ``_apply_state`` (adopt a state that is already
    a private copy).
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        self._subject_id: str = uuid.uuid4().hex
        self._strict: bool = load_settings().strict_restore if strict is None else strict

    @property
    def subject_id(self) -> str:
        return self._subject_id

    @property
    def strict(self) -> bool:
        return self._strict

    @abstractmethod
    def _capture_state(self) -> S:
        """Return the live state; the caller deep-copies it."""

    @abstractmethod
    def _apply_state(self, state: S) -> None:
        """Adopt ``state``, which is already a private copy."""

    def save(self, note: str | None = None) -> Snapshot[S]:
        """Capture an immutable, independent snapshot of the current state."""
        return Snapshot.capture(self._capture_state(), origin=self._subject_id, note=note)

    def restore(self, snapshot: Snapshot[S]) -> None:
        """
        Replace the current state wholesale with ``snapshot``'s state.

        Restoring the same snapshot repeatedly yields the same state.

        Raises
        ------
        ForeignSnapshot
            Only in strict mode, when ``snapshot`` came from another subject.
        """
        if self._strict and snapshot.origin != self._subject_id:
            logger.warning(
                "rejected snapshot from %s in strict subject %s",
                snapshot.origin,
                self._subject_id,
            )
            raise ForeignSnapshot(expected=self._subject_id, actual=snapshot.origin)
        self._apply_state(snapshot.state)


class TextEditor(Subject[str]):
    """A text buffer whose contents can be saved and restored."""

    def __init__(self, text: str = "", *, strict: bool | None = None) -> None:
        super().__init__(strict=strict)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def _capture_state(self) -> str:
        return self._text

    def _apply_state(self, state: str) -> None:
        self._text = state


class StateBoard(Subject[dict[str, Any]]):
    """
    Key-value board with a revision counter.

    ``put`` bumps the revision; snapshots capture both the entries and the
    revision, and ``restore`` brings both back.
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        super().__init__(strict=strict)
        self._store: dict[str, Any] = {}
        self._rev: int = 0

    # ------------------------------- KV API ---------------------------------

    def put(self, key: str, value: Any) -> None:
        """Insert or update ``key`` with ``value`` and bump the revision counter."""
        self._store[key] = value
        self._rev += 1

    def get(self, key: str, default: T | None = None) -> T | None:
        """Return the stored value for ``key``, or ``default`` if not found."""
        if key in self._store:
            return cast(T | None, self._store[key])
        return default

    def keys(self) -> tuple[str, ...]:
        """Return the current keys as a sorted tuple (stable for tests)."""
        return tuple(sorted(self._store))

    @property
    def revision(self) -> int:
        return self._rev

    def __len__(self) -> int:
        return len(self._store)

    # ----------------------------- State hooks ------------------------------

    def _capture_state(self) -> dict[str, Any]:
        return {"store": self._store, "revision": self._rev}

    def _apply_state(self, state: dict[str, Any]) -> None:
        self._store = state["store"]
        self._rev = int(state["revision"])


__all__ = ["Originator", "Subject", "TextEditor", "StateBoard"]
