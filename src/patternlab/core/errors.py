"""Library exception hierarchy.

Every error raised by patternlab derives from :class:`PatternLabError` and
also from the closest builtin, so callers can catch either:

- :class:`IndexOutOfRange` (``IndexError``): a history index is not populated.
- :class:`MalformedKey` (``ValueError``): registry key fields are missing,
  unknown, or not scalars.
- :class:`ForeignSnapshot` (``ValueError``): a strict subject was asked to
  restore a snapshot taken from another subject.
"""

from __future__ import annotations


class PatternLabError(Exception):
    """Base class for all patternlab errors."""


class IndexOutOfRange(PatternLabError, IndexError):
    """Requested history index is negative or past the end."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"history index {index} out of range (length {length})")


class MalformedKey(PatternLabError, ValueError):
    """Registry key fields do not describe a well-formed record."""


class ForeignSnapshot(PatternLabError, ValueError):
    """Snapshot origin does not match the restoring subject."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"snapshot taken from subject {actual!r}, cannot restore into {expected!r}")


__all__ = ["PatternLabError", "IndexOutOfRange", "MalformedKey", "ForeignSnapshot"]
