"""
Per-session character history.

CharacterHistory is the public API for the history. One instance belongs
to one game session: create it at birth, clear_all() it on restart and
drop it when the session ends.
"""

from __future__ import annotations

from typing import Iterable

from ..config import HistoryConfig
from ..context import Artifact, ArtifactDescriber, SessionContext, SessionState, describe_artifact
from .capacity import CapacityManager
from .log import EventLog, HistoryView
from .recorder import EventRecorder, require_artifact
from .tags import HistoryTag
from .tracker import ArtifactTracker
from .unmask import unmask_unknown


class CharacterHistory:
    """
    Facade over the log, tracker and recorder of one session.

    Everything external (game systems, the CLI, tests) should call into
    this instead of wiring the pieces together.
    """

    def __init__(
        self,
        context: SessionContext | None = None,
        *,
        config: HistoryConfig | None = None,
        describe: ArtifactDescriber = describe_artifact,
    ):
        self.config = config or HistoryConfig()
        self.context = context if context is not None else SessionState()
        self.log = EventLog(
            CapacityManager(
                birth_size=self.config.birth_size,
                grow_step=self.config.grow_step,
                max_entries=self.config.max_entries,
            )
        )
        self.tracker = ArtifactTracker(self.log)
        self.recorder = EventRecorder(self.log, self.tracker, self.context, describe)

    # --- Recording --------------------------------------------------------

    def add_event(
        self,
        flags: Iterable[HistoryTag | str],
        artifact: Artifact | None,
        dungeon_level: int,
        character_level: int,
        turn_number: int,
        text: str,
    ) -> bool:
        return self.recorder.record(flags, artifact, dungeon_level, character_level, turn_number, text)

    def add_event_simple(self, text: str, tag: HistoryTag | str, artifact: Artifact | None = None) -> bool:
        return self.recorder.record_simple(text, tag, artifact)

    def add_or_update_artifact(self, artifact: Artifact, known: bool, found: bool) -> bool:
        """Log an artifact being found, missed or identified."""
        return self.recorder.record_artifact_event(artifact, known, found)

    def lose_artifact(self, artifact: Artifact) -> bool:
        """
        Mark an artifact as lost for good.

        Covers both leaving it behind on a level and a store purging it
        after it was sold; the two are recorded identically. If the
        artifact was never logged, a "Missed" entry is recorded instead
        and False is returned.
        """
        artifact = require_artifact(artifact)
        if self.tracker.mark_lost(artifact.aidx):
            return True
        self.recorder.record_artifact_event(artifact, known=False, found=False)
        return False

    # --- Queries ----------------------------------------------------------

    def is_artifact_known(self, artifact: Artifact) -> bool:
        return self.tracker.is_known(require_artifact(artifact).aidx)

    def entry_count(self) -> int:
        return self.log.count()

    def get_entries(self) -> tuple[HistoryView, int]:
        """Read-only view of the entries plus their count; re-fetch after any change."""
        return self.log.snapshot()

    @property
    def capacity(self) -> int:
        return self.log.capacity

    # --- Lifecycle --------------------------------------------------------

    def unmask_unknown(self) -> None:
        unmask_unknown(self.log)

    def clear_all(self) -> None:
        self.log.clear()
