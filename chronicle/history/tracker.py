"""
Artifact state tracking over the history log.

An artifact's entries form a timeline (found -> lost -> found again ...).
The most recent entry is the authoritative one, so every search runs
backward from the newest entry and stops at the first match.

An entry is "active" when it does not carry the lost tag. Lost entries
stay in the log; re-finding an artifact in preserve mode adds a new
entry instead of reviving an old one.
"""

from __future__ import annotations

import logging

from .entry import HistoryEntry
from .log import EventLog
from .tags import HistoryTag

logger = logging.getLogger(__name__)


def _require_artifact_id(artifact_id: int) -> None:
    if not isinstance(artifact_id, int) or artifact_id <= 0:
        raise ValueError(f"artifact_id must be a positive int, got {artifact_id!r}")


class ArtifactTracker:
    """Backward-search queries and state transitions for artifact entries."""

    def __init__(self, log: EventLog):
        self.log = log

    def latest_position(self, artifact_id: int, *, skip_lost: bool = False) -> int | None:
        """
        Position of the most recent entry for an artifact.

        Args:
            artifact_id: Artifact to look for
            skip_lost: Ignore entries carrying the lost tag

        Returns:
            Position in the log, or None if there is no matching entry
        """
        _require_artifact_id(artifact_id)
        for position in reversed(self.log.positions_for(artifact_id)):
            entry = self.log.entry_at(position)
            if skip_lost and entry.has(HistoryTag.ARTIFACT_LOST):
                continue
            return position
        return None

    def latest_entry(self, artifact_id: int, *, skip_lost: bool = False) -> HistoryEntry | None:
        position = self.latest_position(artifact_id, skip_lost=skip_lost)
        return None if position is None else self.log.entry_at(position)

    def mark_known(self, artifact_id: int) -> bool:
        """
        Reduce the artifact's latest entry to just the known tag.

        Lost entries are included in the search. Returns False if the
        artifact has no entry yet.
        """
        position = self.latest_position(artifact_id)
        if position is None:
            return False
        self.log.replace_flags(position, {HistoryTag.ARTIFACT_KNOWN})
        logger.debug("Artifact %d marked known at entry %d", artifact_id, position)
        return True

    def mark_lost(self, artifact_id: int) -> bool:
        """
        Add the lost tag to the artifact's latest entry, keeping its other tags.

        Returns False if the artifact has no entry at all; the caller is
        expected to record a "missed" entry in that case.
        """
        position = self.latest_position(artifact_id)
        if position is None:
            return False
        entry = self.log.entry_at(position)
        self.log.replace_flags(position, entry.flags | {HistoryTag.ARTIFACT_LOST})
        logger.debug("Artifact %d marked lost at entry %d", artifact_id, position)
        return True

    def is_known(self, artifact_id: int) -> bool:
        """True if any entry for the artifact carries the known tag."""
        _require_artifact_id(artifact_id)
        return any(
            self.log.entry_at(position).has(HistoryTag.ARTIFACT_KNOWN)
            for position in reversed(self.log.positions_for(artifact_id))
        )

    def is_active(self, artifact_id: int) -> bool:
        """True if the artifact has an entry that is not marked lost."""
        return self.latest_position(artifact_id, skip_lost=True) is not None
