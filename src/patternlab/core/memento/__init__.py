"""Memento components: snapshots, subjects, and the linear history store."""

from __future__ import annotations

from .history import History, record_from
from .snapshot import Snapshot
from .subject import Originator, StateBoard, Subject, TextEditor

__all__ = ["History", "Originator", "Snapshot", "StateBoard", "Subject", "TextEditor", "record_from"]
