"""Tests for subjects: snapshot isolation, restore semantics, provenance policy."""

from __future__ import annotations

import re
from typing import Any

import pytest

from patternlab.core.errors import ForeignSnapshot
from patternlab.core.memento.subject import Originator, StateBoard, Subject, TextEditor
from patternlab.core.settings import load_settings


def test_subjects_satisfy_originator_protocol() -> None:
    assert isinstance(TextEditor(), Originator)
    assert isinstance(StateBoard(), Originator)


def test_snapshot_metadata() -> None:
    editor = TextEditor("draft")
    snap = editor.save("checkpoint")
    assert snap.origin == editor.subject_id
    assert snap.note == "checkpoint"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z", snap.timestamp)


def test_snapshot_is_frozen() -> None:
    snap = TextEditor("x").save()
    with pytest.raises(AttributeError):
        snap.note = "changed"  # type: ignore[misc]


def test_text_snapshot_isolated_from_later_edits() -> None:
    editor = TextEditor()
    editor.set_text("S1")
    snap = editor.save()
    editor.set_text("S2")
    assert snap.state == "S1"
    assert editor.text == "S2"


def test_board_snapshot_deep_copies_nested_state() -> None:
    board = StateBoard()
    board.put("plan", {"steps": ["parse", "explain"]})
    snap = board.save()

    board.get("plan")["steps"].append("review")  # type: ignore[index]
    board.put("extra", 1)

    assert snap.state["store"] == {"plan": {"steps": ["parse", "explain"]}}
    assert snap.state["revision"] == 1


def test_snapshot_state_cannot_be_mutated_through_accessor() -> None:
    board = StateBoard()
    board.put("items", [1, 2])
    snap = board.save()

    leaked = snap.state
    leaked["store"]["items"].append(3)

    assert snap.state["store"]["items"] == [1, 2]


def test_board_restore_does_not_alias_snapshot() -> None:
    board = StateBoard()
    board.put("items", [1])
    snap = board.save()

    board.restore(snap)
    board.get("items").append(2)  # type: ignore[union-attr]

    assert snap.state["store"]["items"] == [1]


def test_board_restore_brings_back_entries_and_revision() -> None:
    board = StateBoard()
    board.put("a", 1)
    snap = board.save()
    board.put("b", 2)
    board.put("a", 10)
    assert board.revision == 3

    board.restore(snap)
    assert board.keys() == ("a",)
    assert board.get("a") == 1
    assert board.get("b", default="missing") == "missing"
    assert board.revision == 1
    assert len(board) == 1


def test_restore_is_idempotent() -> None:
    board = StateBoard()
    board.put("k", {"v": 1})
    snap = board.save()
    board.put("k", {"v": 2})

    board.restore(snap)
    once = (board.keys(), board.get("k"), board.revision)
    board.restore(snap)
    twice = (board.keys(), board.get("k"), board.revision)
    assert once == twice == (("k",), {"v": 1}, 1)

    editor = TextEditor("a")
    text_snap = editor.save()
    editor.set_text("b")
    editor.restore(text_snap)
    editor.restore(text_snap)
    assert editor.text == "a"


def test_permissive_restore_accepts_foreign_snapshot() -> None:
    """By default a snapshot from one editor restores into another."""
    source, target = TextEditor("from source"), TextEditor("original")
    assert target.strict is False
    target.restore(source.save())
    assert target.text == "from source"


def test_strict_restore_rejects_foreign_snapshot() -> None:
    source = TextEditor("from source")
    target = TextEditor("original", strict=True)

    with pytest.raises(ForeignSnapshot) as info:
        target.restore(source.save())
    assert info.value.expected == target.subject_id
    assert info.value.actual == source.subject_id
    assert target.text == "original"

    own = target.save()
    target.set_text("changed")
    target.restore(own)
    assert target.text == "original"


def test_strict_default_comes_from_settings(monkeypatch: Any) -> None:
    monkeypatch.setenv("PATTERNLAB_STRICT_RESTORE", "1")
    load_settings.cache_clear()

    board = StateBoard()
    assert board.strict is True
    with pytest.raises(ForeignSnapshot):
        board.restore(StateBoard().save())

    # An explicit argument wins over the environment.
    assert TextEditor(strict=False).strict is False


def test_subject_base_cannot_be_instantiated() -> None:
    """`Subject` is abstract until both state hooks are implemented."""
    with pytest.raises(TypeError):
        Subject()  # type: ignore[abstract]

    class HalfDone(Subject[str]):
        def _capture_state(self) -> str:
            return ""

    with pytest.raises(TypeError):
        HalfDone()  # type: ignore[abstract]
