"""
Character dump rendering of the history.

Entries for artifacts that are still unidentified are left out, so live
displays never spoil them. After unmask_unknown() they show up as known.
"""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.table import Table

from .history.entry import HistoryEntry
from .history.tags import HistoryTag

FEET_PER_LEVEL = 50


def format_depth(dungeon_level: int) -> str:
    if dungeon_level == 0:
        return "Town"
    return f"{dungeon_level * FEET_PER_LEVEL}ft"


def format_note(entry: HistoryEntry) -> str:
    if entry.has(HistoryTag.ARTIFACT_LOST):
        return f"{entry.text} (LOST)"
    return entry.text


def is_displayed(entry: HistoryEntry) -> bool:
    """Hide artifacts the player has not identified yet."""
    return not entry.has(HistoryTag.ARTIFACT_UNKNOWN)


def format_history(entries: Iterable[HistoryEntry]) -> str:
    """Format the history as the fixed-width block used in character dumps."""
    lines = [
        "[Player history]",
        f"{'Turn':>10}  {'Depth':>6}  {'Level':>5}  Note",
    ]
    for entry in entries:
        if not is_displayed(entry):
            continue
        lines.append(
            f"{entry.turn_number:>10}  {format_depth(entry.dungeon_level):>6}  "
            f"{entry.character_level:>5}  {format_note(entry)}"
        )
    return "\n".join(lines) + "\n"


def history_table(entries: Iterable[HistoryEntry], *, title: str = "Player history") -> Table:
    table = Table(title=title)
    table.add_column("turn", justify="right", style="cyan", no_wrap=True)
    table.add_column("depth", justify="right")
    table.add_column("level", justify="right")
    table.add_column("note")
    table.add_column("tags", style="dim")

    for entry in entries:
        if not is_displayed(entry):
            continue
        table.add_row(
            str(entry.turn_number),
            format_depth(entry.dungeon_level),
            str(entry.character_level),
            escape(format_note(entry)),
            ", ".join(sorted(tag.value for tag in entry.flags)),
        )
    return table
