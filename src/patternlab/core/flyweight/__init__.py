"""Flyweight components: shared records, the registry, and the forest context."""

from __future__ import annotations

from .forest import Forest
from .records import Placement, SharedRecord, TreeType
from .registry import RegistryStats, SharedRegistry

__all__ = ["Forest", "Placement", "RegistryStats", "SharedRecord", "SharedRegistry", "TreeType"]
