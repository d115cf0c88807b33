"""
History entry record.

Entries are written once. Flags are normalized to a frozenset of tags and
text is cut to HISTORY_TEXT_MAX on construction. The only later change is
to their flags, which the event log applies by swapping in a copy at the
same position.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from .tags import HistoryTag, coerce_tags

# Longest note text kept on an entry; longer text is cut silently.
HISTORY_TEXT_MAX = 80


@dataclass(frozen=True)
class HistoryEntry:
    """
    A single milestone in the character's history.

    dungeon_level, character_level and turn_number are a snapshot of the
    session at record time. artifact_id is 0 for entries that are not
    about an artifact.
    """

    flags: frozenset[HistoryTag] = field(default_factory=frozenset)
    dungeon_level: int = 0
    character_level: int = 0
    turn_number: int = 0
    artifact_id: int = 0
    text: str = ""

    def __post_init__(self) -> None:
        if self.artifact_id < 0:
            raise ValueError(f"artifact_id must be >= 0, got {self.artifact_id}")
        object.__setattr__(self, "flags", coerce_tags(self.flags))
        object.__setattr__(self, "text", self.text[:HISTORY_TEXT_MAX])

    @classmethod
    def build(
        cls,
        flags: Iterable[HistoryTag | str],
        *,
        artifact_id: int = 0,
        dungeon_level: int = 0,
        character_level: int = 0,
        turn_number: int = 0,
        text: str = "",
    ) -> HistoryEntry:
        """Create an entry from any iterable of tags."""
        return cls(
            flags=frozenset(flags),
            dungeon_level=dungeon_level,
            character_level=character_level,
            turn_number=turn_number,
            artifact_id=artifact_id,
            text=text,
        )

    def has(self, tag: HistoryTag) -> bool:
        return tag in self.flags

    @property
    def is_artifact(self) -> bool:
        return self.artifact_id != 0

    def with_flags(self, flags: Iterable[HistoryTag | str]) -> HistoryEntry:
        """Return a copy of this entry with only its flags replaced."""
        return replace(self, flags=coerce_tags(flags))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "flags": sorted(tag.value for tag in self.flags),
            "dungeon_level": self.dungeon_level,
            "character_level": self.character_level,
            "turn_number": self.turn_number,
            "artifact_id": self.artifact_id,
            "text": self.text,
        }
