# src/patternlab/cli.py
"""
patternlab Command Line Interface (CLI).

This module is a small terminal front-end over the two core components,
built with `typer` and `rich`. Nothing it does is persisted.

Commands
--------
- **forest**: plant trees through a shared registry and show which
  placements share a tree type.
- **editor**: type a sequence of texts into an editor, saving after each one,
  then restore an earlier version from the history.

Usage
-----
    $ patternlab forest -t "1,1,Oak,Green,Rough" -t "3,5,Oak,Green,Rough"
    $ patternlab editor "Hello, World!" "This is a new text." --restore 0
"""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from patternlab.core.errors import PatternLabError
from patternlab.core.flyweight.forest import Forest
from patternlab.core.memento.history import History, record_from
from patternlab.core.memento.subject import TextEditor

load_dotenv()

app = typer.Typer(
    help="patternlab: shared-instance registries and snapshot histories.",
    rich_markup_mode="markdown",
)
console = Console()

DEFAULT_TREES: tuple[str, ...] = (
    "1,1,Oak,Green,Rough",
    "2,3,Pine,Dark Green,Smooth",
    "3,5,Oak,Green,Rough",
)
DEFAULT_TEXTS: tuple[str, ...] = ("Hello, World!", "This is a new text.")


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def parse_tree(entry: str) -> tuple[int, int, dict[str, str]]:
    """
    Parse ``"x,y,name,color,texture"`` into coordinates and tree-type fields.

    Raises
    ------
    typer.BadParameter
        If the entry does not have five parts or the coordinates are not integers.
    """
    parts = [p.strip() for p in entry.split(",")]
    if len(parts) != 5:
        raise typer.BadParameter(f"expected 'x,y,name,color,texture', got {entry!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise typer.BadParameter(f"coordinates must be integers in {entry!r}") from e
    return x, y, {"name": parts[2], "color": parts[3], "texture": parts[4]}


def _render_forest(forest: Forest) -> None:
    table = Table(title="Placements")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("tree type")
    table.add_column("shared #", justify="right", style="cyan")

    for placement in forest.placements():
        handle = forest.registry.handle_of(placement.record)
        record = placement.record
        table.add_row(
            str(placement.x),
            str(placement.y),
            f"{record.name} / {record.color} / {record.texture}",
            str(handle),
        )
    console.print(table)

    for line in forest.render():
        console.print(f" [dim]{line}[/dim]")

    stats = forest.registry.stats()
    console.print(
        f"\n[bold]{len(forest)}[/bold] placements share "
        f"[bold green]{stats.created}[/bold green] tree types "
        f"({stats.hits} reused)."
    )


def _render_history(history: History[str], current: str) -> None:
    table = Table(title="History")
    table.add_column("#", justify="right")
    table.add_column("saved at")
    table.add_column("text")
    for i, snap in enumerate(history):
        table.add_row(str(i), snap.timestamp, snap.state)
    console.print(table)
    console.print(Panel.fit(current, title="Current text", border_style="green"))


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def forest(
    tree: Annotated[
        list[str] | None,
        typer.Option(
            "--tree",
            "-t",
            help="Tree to plant as 'x,y,name,color,texture'. Repeatable.",
        ),
    ] = None,
) -> None:
    """Plant trees through a shared registry and show the sharing."""
    entries = tree or list(DEFAULT_TREES)
    woods = Forest()
    try:
        for entry in entries:
            x, y, fields = parse_tree(entry)
            woods.plant(x, y, **fields)
    except PatternLabError as e:
        console.print(f"[bold red]Registry error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    _render_forest(woods)


@app.command()  # type: ignore[misc]
def editor(
    texts: Annotated[
        list[str] | None,
        typer.Argument(help="Texts to type in order; the editor saves after each one."),
    ] = None,
    restore: Annotated[
        int,
        typer.Option("--restore", "-r", help="History index to restore at the end."),
    ] = 0,
) -> None:
    """Edit, save after each change, then restore a version from history."""
    entries = texts or list(DEFAULT_TEXTS)
    buffer = TextEditor()
    history: History[str] = History()

    for text in entries:
        buffer.set_text(text)
        record_from(buffer, history)

    try:
        buffer.restore(history.get(restore))
    except PatternLabError as e:
        console.print(f"[bold red]History error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    _render_history(history, buffer.text)


if __name__ == "__main__":
    app()
