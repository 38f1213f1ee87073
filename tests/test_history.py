"""Unit tests for the linear history store (caretaker)."""

from __future__ import annotations

import pytest

from patternlab.core.errors import IndexOutOfRange, PatternLabError
from patternlab.core.memento.history import History, record_from
from patternlab.core.memento.snapshot import Snapshot
from patternlab.core.memento.subject import TextEditor


def _history_of(*texts: str) -> tuple[TextEditor, History[str], list[Snapshot[str]]]:
    editor = TextEditor()
    history: History[str] = History()
    snaps: list[Snapshot[str]] = []
    for text in texts:
        editor.set_text(text)
        snaps.append(record_from(editor, history, note=f"typed {text!r}"))
    return editor, history, snaps


def test_get_returns_snapshots_in_recorded_order() -> None:
    _, history, snaps = _history_of("a", "b", "c", "d")
    assert len(history) == 4
    for i, snap in enumerate(snaps):
        assert history.get(i) is snap
    assert [s.state for s in history] == ["a", "b", "c", "d"]
    assert history.snapshots() == tuple(snaps)


def test_record_returns_index() -> None:
    editor = TextEditor("x")
    history: History[str] = History()
    assert history.record(editor.save()) == 0
    assert history.record(editor.save()) == 1


@pytest.mark.parametrize("size", [0, 1, 3])  # type: ignore[misc]
def test_out_of_range_indices_raise(size: int) -> None:
    _, history, _ = _history_of(*[str(i) for i in range(size)])
    for index in (-1, size, size + 10):
        with pytest.raises(IndexOutOfRange) as info:
            history.get(index)
        assert info.value.index == index
        assert info.value.length == size


def test_out_of_range_is_index_error() -> None:
    history: History[str] = History()
    with pytest.raises(IndexError):
        history.get(0)
    assert issubclass(IndexOutOfRange, PatternLabError)


def test_retrieval_never_mutates_history() -> None:
    _, history, snaps = _history_of("one", "two")
    history.get(0)
    history.try_get(5)
    history.latest()
    list(history)
    assert history.snapshots() == tuple(snaps)


def test_try_get_and_latest() -> None:
    _, history, snaps = _history_of("one", "two")
    assert history.try_get(1).unwrap() is snaps[1]
    missing = history.try_get(2)
    assert missing.is_err() and isinstance(missing.unwrap_err(), IndexOutOfRange)
    assert history.latest() is snaps[-1]

    with pytest.raises(IndexOutOfRange):
        History().latest()


def test_history_keeps_entries_after_restore() -> None:
    editor, history, _ = _history_of("first", "second")
    editor.restore(history.get(0))
    assert len(history) == 2
    assert history.get(1).state == "second"


def test_editor_undo_scenario() -> None:
    """Save two versions, restore the first; history still reports both."""
    editor = TextEditor()
    history: History[str] = History()
    assert editor.text == ""

    editor.set_text("Hello, World!")
    snap_a = editor.save()
    history.record(snap_a)

    editor.set_text("This is a new text.")
    history.record(editor.save())

    editor.restore(history.get(0))
    assert editor.text == "Hello, World!"
    assert history.get(0).state == snap_a.state == "Hello, World!"
    assert history.get(1).state == "This is a new text."

    editor.set_text("something else")
    assert history.get(0).state == "Hello, World!"
