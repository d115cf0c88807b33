"""
Collaborators the history reads from the running game.

The history does not own character or dungeon state. It asks a session
context for depth, level and turn at record time, and a describer for the
display name of an artifact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

_ARTICLES = ("the ", "a ", "an ")


@dataclass(frozen=True)
class Artifact:
    """An artifact definition from the artifact registry."""

    aidx: int  # Stable registry id, never 0
    name: str

    def __post_init__(self) -> None:
        if self.aidx <= 0:
            raise ValueError(f"Artifact id must be > 0, got {self.aidx}")
        if not self.name:
            raise ValueError("Artifact name is required")


class SessionContext(Protocol):
    """Read-only view of the session clock and character progress."""

    @property
    def depth(self) -> int: ...

    @property
    def level(self) -> int: ...

    @property
    def turn(self) -> int: ...


@dataclass
class SessionState:
    """
    Plain mutable session context.

    turn is the game clock in player turns (the game's energy counter
    already divided down to turns).
    """

    depth: int = 0
    level: int = 1
    turn: int = 0

    def advance(self, turns: int = 1) -> None:
        if turns < 0:
            raise ValueError("Cannot move the session clock backwards")
        self.turn += turns


ArtifactDescriber = Callable[[Artifact], str]


def describe_artifact(artifact: Artifact) -> str:
    """Prefixed base form of an artifact name, e.g. "the Phial of Galadriel"."""
    name = artifact.name.strip()
    if name.lower().startswith(_ARTICLES):
        return name
    return f"the {name}"
