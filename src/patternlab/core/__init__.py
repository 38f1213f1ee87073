"""Core package initializer for patternlab.

Downstream code imports from the submodules directly, e.g.:
    from patternlab.core.settings import settings, load_settings, Settings, get_logger
    from patternlab.core.flyweight.registry import SharedRegistry
    from patternlab.core.memento.history import History
"""

from __future__ import annotations

__all__ = ["__doc__"]
