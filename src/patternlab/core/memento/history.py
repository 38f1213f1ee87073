"""
Linear history store (caretaker).

The history keeps snapshots in the order they were recorded and hands them
back by index. It never looks inside a snapshot and never reorders or drops
entries; restoring a subject from a snapshot leaves the history untouched.

- ``record(snapshot)``: append, O(1) amortized.
- ``get(index)``: return the snapshot or raise :class:`IndexOutOfRange`.
- ``try_get(index)``: same lookup as a :class:`Result`.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

from patternlab.core.errors import IndexOutOfRange
from patternlab.core.result import Result, err, ok
from patternlab.core.settings import get_logger

from .snapshot import Snapshot
from .subject import Originator

S = TypeVar("S")

logger = get_logger("patternlab.memento")


class History(Generic[S]):
    """
    Append-only sequence of snapshots, indexed from 0.

    Attributes
    ----------
    _items : list[Snapshot[S]]
        Recorded snapshots in insertion order.
    _lock : threading.Lock
        Serializes appends so insertion order stays deterministic.
    """

    __slots__ = ("_items", "_lock")

    def __init__(self) -> None:
        self._items: list[Snapshot[S]] = []
        self._lock = threading.Lock()

    def record(self, snapshot: Snapshot[S]) -> int:
        """Append ``snapshot`` and return its index."""
        with self._lock:
            self._items.append(snapshot)
            index = len(self._items) - 1
        logger.debug("recorded snapshot #%d from %s (%s)", index, snapshot.origin, snapshot.note)
        return index

    def get(self, index: int) -> Snapshot[S]:
        """
        Return the snapshot recorded at ``index``.

        Negative indices are rejected rather than counted from the end.

        Raises
        ------
        IndexOutOfRange
            If ``index < 0`` or ``index >= len(self)``.
        """
        with self._lock:
            length = len(self._items)
            if index < 0 or index >= length:
                raise IndexOutOfRange(index, length)
            return self._items[index]

    def try_get(self, index: int) -> Result[Snapshot[S], IndexOutOfRange]:
        """Return ``Ok(snapshot)`` or ``Err(IndexOutOfRange)`` without raising."""
        try:
            return ok(self.get(index))
        except IndexOutOfRange as exc:
            return err(exc)

    def latest(self) -> Snapshot[S]:
        """Return the most recent snapshot; raises :class:`IndexOutOfRange` when empty."""
        with self._lock:
            if not self._items:
                raise IndexOutOfRange(0, 0)
            return self._items[-1]

    def snapshots(self) -> tuple[Snapshot[S], ...]:
        """Return all recorded snapshots (immutable tuple)."""
        with self._lock:
            return tuple(self._items)

    def __iter__(self) -> Iterator[Snapshot[S]]:
        return iter(self.snapshots())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"History(size={len(self)})"


def record_from(
    subject: Originator[S], history: History[S], note: str | None = None
) -> Snapshot[S]:
    """Save ``subject`` and record the snapshot in ``history`` in one step."""
    snap = subject.save(note)
    history.record(snap)
    return snap


__all__ = ["History", "record_from"]
