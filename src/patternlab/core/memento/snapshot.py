"""
Snapshot definition.

This module defines the immutable record of a subject's state at a specific
point in time. It is separated from ``subject.py`` so the history store can
depend on it without knowing about any concrete subject.

Design Notes
------------
- **Immutability**: the dataclass is frozen, and the captured state is a deep
  copy that never leaves the snapshot by reference. :attr:`Snapshot.state`
  hands out a fresh deep copy on every access.
- **Timestamps**: stored as ISO-8601 strings (``"2025-11-12T02:02:37.104000Z"``),
  converted at the moment of capture.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

S = TypeVar("S")


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with a ``Z`` suffix."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@dataclass(frozen=True, slots=True)
class Snapshot(Generic[S]):
    """
    Immutable record of a subject's state.

    Attributes
    ----------
    origin : str
        Opaque id of the subject that produced this snapshot.
    timestamp : str
        ISO-8601 UTC time of capture.
    note : str | None
        Optional human-readable label (e.g., 'before bulk edit').
    """

    origin: str
    timestamp: str
    note: str | None
    _state: S = field(repr=False)

    @classmethod
    def capture(cls, state: S, origin: str, note: str | None = None) -> Snapshot[S]:
        """Deep-copy ``state`` and freeze it together with its provenance."""
        return cls(
            origin=origin,
            timestamp=utc_timestamp(),
            note=note,
            _state=copy.deepcopy(state),
        )

    @property
    def state(self) -> S:
        """Return a deep copy of the captured state."""
        return copy.deepcopy(self._state)


__all__ = ["Snapshot", "utc_timestamp"]
