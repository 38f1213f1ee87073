# scripts/smoke.py
"""
Smoke Test Script for patternlab.

Runs both components end to end and logs what happens.

Usage
-----
    $ uv run python scripts/smoke.py
    $ LOG_LEVEL=DEBUG uv run python scripts/smoke.py
"""

from dotenv import load_dotenv

from patternlab.core.flyweight.forest import Forest
from patternlab.core.memento.history import History, record_from
from patternlab.core.memento.subject import TextEditor
from patternlab.core.settings import get_logger

load_dotenv()
logger = get_logger("patternlab.smoke")


def run_forest() -> None:
    forest = Forest()
    forest.plant(1, 1, name="Oak", color="Green", texture="Rough")
    forest.plant(2, 3, name="Pine", color="Dark Green", texture="Smooth")
    forest.plant(3, 5, name="Oak", color="Green", texture="Rough")

    for line in forest.render():
        logger.info(line)

    placements = forest.placements()
    assert placements[0].record is placements[2].record
    assert placements[0].record is not placements[1].record
    logger.info("forest ok: %s", forest.registry.stats())


def run_editor() -> None:
    editor = TextEditor()
    history: History[str] = History()

    editor.set_text("Hello, World!")
    record_from(editor, history, note="greeting")
    editor.set_text("This is a new text.")
    record_from(editor, history, note="rewrite")

    editor.restore(history.get(0))
    assert editor.text == "Hello, World!"
    logger.info("editor ok: restored %r from %d snapshots", editor.text, len(history))


if __name__ == "__main__":
    run_forest()
    run_editor()
