"""
Category tags for history entries.

An entry's flags are a set of these tags. Tags are independent by storage;
only the artifact state rules treat the artifact tags as exclusive.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class HistoryTag(str, Enum):
    """Milestone categories.

    - NONE: No category
    - PLAYER_BIRTH: The character was born
    - ARTIFACT_UNKNOWN: An artifact was found but not identified
    - ARTIFACT_KNOWN: An artifact has been identified
    - ARTIFACT_LOST: An artifact was had and then lost
    - PLAYER_DEATH: The character was slain
    - SLAY_UNIQUE: The character slew a unique monster
    - USER_INPUT: A note added by the player
    - SAVEFILE_IMPORT: Added when an older savefile is imported
    - GAIN_LEVEL: The character gained a level
    - GENERIC: Anything else
    """
    NONE = "none"
    PLAYER_BIRTH = "player_birth"
    ARTIFACT_UNKNOWN = "artifact_unknown"
    ARTIFACT_KNOWN = "artifact_known"
    ARTIFACT_LOST = "artifact_lost"
    PLAYER_DEATH = "player_death"
    SLAY_UNIQUE = "slay_unique"
    USER_INPUT = "user_input"
    SAVEFILE_IMPORT = "savefile_import"
    GAIN_LEVEL = "gain_level"
    GENERIC = "generic"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[HistoryTag, str] = {
    HistoryTag.NONE: "",
    HistoryTag.PLAYER_BIRTH: "Player was born",
    HistoryTag.ARTIFACT_UNKNOWN: "Player found but not identified an artifact",
    HistoryTag.ARTIFACT_KNOWN: "Player has identified an artifact",
    HistoryTag.ARTIFACT_LOST: "Player had an artifact and lost it",
    HistoryTag.PLAYER_DEATH: "Player has been slain",
    HistoryTag.SLAY_UNIQUE: "Player has slain a unique monster",
    HistoryTag.USER_INPUT: "User-added note",
    HistoryTag.SAVEFILE_IMPORT: "Added when an older version savefile is imported",
    HistoryTag.GAIN_LEVEL: "Player gained a level",
    HistoryTag.GENERIC: "Anything else not covered here",
}

ARTIFACT_TAGS = frozenset({
    HistoryTag.ARTIFACT_UNKNOWN,
    HistoryTag.ARTIFACT_KNOWN,
    HistoryTag.ARTIFACT_LOST,
})


def tag_set(*tags: HistoryTag | str) -> frozenset[HistoryTag]:
    """
    Build a flag set from tags or their string values.

    Raises:
        ValueError: If a value is not a known tag
    """
    return coerce_tags(tags)


def coerce_tags(tags: Iterable[HistoryTag | str]) -> frozenset[HistoryTag]:
    result: set[HistoryTag] = set()
    for tag in tags:
        try:
            result.add(HistoryTag(tag))
        except ValueError as e:
            raise ValueError(f"Invalid history tag: {tag!r}") from e
    return frozenset(result)
