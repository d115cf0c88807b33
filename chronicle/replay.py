"""
Session replay scripts.

A script is a YAML document describing one session as a list of steps.
Each step is a mapping with a single action key:

    artifacts:
      1: Phial of Galadriel
    steps:
      - birth: Began the quest.
      - depth: 3
      - turn: 1200
      - find: 1                      # found, not yet identified
      - find: {artifact: 1, known: true}
      - identify: 1
      - lose: 1
      - level: 5                     # records "Reached level 5"
      - slay: Grip, Farmer Maggot's Dog
      - note: Sold the spare lantern
      - die: Killed by a cave troll

depth and turn only move the session context; the other actions record
history through CharacterHistory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

import yaml

from .context import Artifact, SessionState
from .history.history import CharacterHistory
from .history.tags import HistoryTag

ACTIONS = ("birth", "depth", "turn", "level", "find", "identify", "lose", "note", "slay", "die")


@dataclass(frozen=True)
class ReplayStep:
    """One parsed step of a replay script."""

    index: int
    action: str
    value: Any


@dataclass(frozen=True)
class StepOutcome:
    step: ReplayStep
    recorded: bool  # False for context-only steps, no-ops and dropped entries


@dataclass
class ReplayScript:
    artifacts: dict[int, Artifact] = field(default_factory=dict)
    steps: list[ReplayStep] = field(default_factory=list)

    def artifact(self, ref: Any) -> Artifact:
        try:
            return self.artifacts[int(ref)]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Unknown artifact reference: {ref!r}") from e


def parse_script(data: Any) -> ReplayScript:
    """
    Validate a loaded YAML document and build a ReplayScript.

    Raises:
        ValueError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ValueError("Replay script must be a mapping with a 'steps' list")

    artifacts: dict[int, Artifact] = {}
    raw_artifacts = data.get("artifacts") or {}
    if not isinstance(raw_artifacts, dict):
        raise ValueError("'artifacts' must map artifact ids to names")
    for raw_id, name in raw_artifacts.items():
        try:
            aidx = int(raw_id)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Artifact id must be an integer: {raw_id!r}") from e
        artifacts[aidx] = Artifact(aidx=aidx, name=str(name))

    raw_steps = data.get("steps")
    if not isinstance(raw_steps, list):
        raise ValueError("Replay script must have a 'steps' list")

    steps: list[ReplayStep] = []
    for i, raw in enumerate(raw_steps):
        if not isinstance(raw, dict) or len(raw) != 1:
            raise ValueError(f"Step {i}: expected a mapping with exactly one action")
        action, value = next(iter(raw.items()))
        if action not in ACTIONS:
            raise ValueError(f"Step {i}: unknown action {action!r}")
        steps.append(ReplayStep(index=i, action=action, value=value))

    return ReplayScript(artifacts=artifacts, steps=steps)


def load_script(path: str | Path) -> ReplayScript:
    """
    Load a replay script from YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or the script is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Replay script not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse replay script: {e}") from e
    return parse_script(data)


class SessionReplayer:
    """Drives a CharacterHistory through the steps of a script."""

    def __init__(self, script: ReplayScript, history: CharacterHistory, state: SessionState):
        self.script = script
        self.history = history
        self.state = state
        self._handlers: dict[str, Callable[[Any], bool]] = {
            "birth": self._birth,
            "depth": self._depth,
            "turn": self._turn,
            "level": self._level,
            "find": self._find,
            "identify": self._identify,
            "lose": self._lose,
            "note": self._note,
            "slay": self._slay,
            "die": self._die,
        }

    def run(self) -> list[StepOutcome]:
        outcomes = []
        for step in self.script.steps:
            try:
                recorded = self._handlers[step.action](step.value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Step {step.index} ({step.action}): {e}") from e
            outcomes.append(StepOutcome(step=step, recorded=recorded))
        return outcomes

    def _birth(self, value: Any) -> bool:
        return self.history.add_event_simple(str(value or "Began the quest."), HistoryTag.PLAYER_BIRTH)

    def _depth(self, value: Any) -> bool:
        depth = int(value)
        if depth < 0:
            raise ValueError("depth must be >= 0")
        self.state.depth = depth
        return False

    def _turn(self, value: Any) -> bool:
        turn = int(value)
        if turn < self.state.turn:
            raise ValueError(f"turn {turn} is earlier than the current turn {self.state.turn}")
        self.state.turn = turn
        return False

    def _level(self, value: Any) -> bool:
        self.state.level = int(value)
        return self.history.add_event_simple(f"Reached level {self.state.level}", HistoryTag.GAIN_LEVEL)

    def _find(self, value: Any) -> bool:
        if isinstance(value, dict):
            artifact = self.script.artifact(value.get("artifact"))
            known = bool(value.get("known", False))
        else:
            artifact = self.script.artifact(value)
            known = False
        return self.history.add_or_update_artifact(artifact, known=known, found=True)

    def _identify(self, value: Any) -> bool:
        return self.history.add_or_update_artifact(self.script.artifact(value), known=True, found=True)

    def _lose(self, value: Any) -> bool:
        return self.history.lose_artifact(self.script.artifact(value))

    def _note(self, value: Any) -> bool:
        return self.history.add_event_simple(str(value), HistoryTag.USER_INPUT)

    def _slay(self, value: Any) -> bool:
        return self.history.add_event_simple(f"Slew {value}", HistoryTag.SLAY_UNIQUE)

    def _die(self, value: Any) -> bool:
        return self.history.add_event_simple(str(value or "Died"), HistoryTag.PLAYER_DEATH)
