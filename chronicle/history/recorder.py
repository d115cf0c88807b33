"""
Composition of new history entries.

The recorder is what other game systems call: it stamps entries with the
current session context and appends them to the log. Artifact events go
through record_artifact_event(), which decides between updating an
existing entry and logging a new one.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..context import Artifact, ArtifactDescriber, SessionContext, describe_artifact
from .entry import HistoryEntry
from .log import EventLog
from .tags import HistoryTag
from .tracker import ArtifactTracker

logger = logging.getLogger(__name__)


def require_artifact(artifact: Artifact | None) -> Artifact:
    if artifact is None:
        raise ValueError("An artifact is required for this operation")
    return artifact


class EventRecorder:
    """Builds entries from session context and appends them to the log."""

    def __init__(
        self,
        log: EventLog,
        tracker: ArtifactTracker,
        context: SessionContext,
        describe: ArtifactDescriber = describe_artifact,
    ):
        self.log = log
        self.tracker = tracker
        self.context = context
        self.describe = describe

    def record(
        self,
        flags: Iterable[HistoryTag | str],
        artifact: Artifact | None,
        dungeon_level: int,
        character_level: int,
        turn_number: int,
        text: str,
    ) -> bool:
        """
        Append a fully specified entry.

        Returns:
            False only if the log is full and cannot grow
        """
        entry = HistoryEntry.build(
            flags,
            artifact_id=artifact.aidx if artifact is not None else 0,
            dungeon_level=dungeon_level,
            character_level=character_level,
            turn_number=turn_number,
            text=text,
        )
        if not self.log.append(entry):
            logger.warning("History full, dropped entry: %s", entry.text)
            return False
        return True

    def record_simple(self, text: str, tag: HistoryTag | str, artifact: Artifact | None = None) -> bool:
        """Append a single-tag entry stamped with the current session context."""
        return self._record_now({tag}, artifact, text)

    def _record_now(self, flags: Iterable[HistoryTag | str], artifact: Artifact | None, text: str) -> bool:
        return self.record(
            flags,
            artifact,
            self.context.depth,
            self.context.level,
            self.context.turn,
            text,
        )

    def record_artifact_event(self, artifact: Artifact | None, known: bool, found: bool) -> bool:
        """
        Log an artifact state change.

        Known artifacts update their active entry in place if one exists,
        otherwise a new known entry is logged. Unknown artifacts are only
        logged when no active entry exists; otherwise the call changes
        nothing and returns False.
        """
        artifact = require_artifact(artifact)
        verb = "Found" if found else "Missed"
        text = f"{verb} {self.describe(artifact)}"

        if known:
            if self.tracker.is_active(artifact.aidx):
                self.tracker.mark_known(artifact.aidx)
                return True
            return self.record_simple(text, HistoryTag.ARTIFACT_KNOWN, artifact)

        if self.tracker.is_active(artifact.aidx):
            return False

        flags = {HistoryTag.ARTIFACT_UNKNOWN}
        if not found:
            flags.add(HistoryTag.ARTIFACT_LOST)
        return self._record_now(flags, artifact, text)
