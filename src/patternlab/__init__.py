"""patternlab: shared-instance registries and snapshot histories.

Two standalone components live under :mod:`patternlab.core`:

- :mod:`patternlab.core.flyweight` deduplicates immutable records by their
  defining fields and hands out shared instances.
- :mod:`patternlab.core.memento` captures point-in-time snapshots of mutable
  subjects and keeps them in an ordered, append-only history.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
