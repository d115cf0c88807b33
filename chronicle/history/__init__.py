"""
Character auto-history for a single game session.

This package records session milestones (level-ups, discoveries,
artifact encounters) for later display on the character sheet and in
the death dump.

Components:
- tags: Closed set of category tags an entry may carry
- entry: HistoryEntry records (immutable apart from their flags)
- capacity: Growth policy for the backing storage
- log: Ordered, append-only entry storage with read-only views
- tracker: Backward search and artifact state transitions
- recorder: Entry composition from session context
- unmask: One-shot end-of-session reveal of unknown artifacts
- history: CharacterHistory, the per-session public surface

Design principles:
- Append-only: entries keep their position and order once written
- Flags only: the only in-place change is to an entry's tag set
- Most recent wins: artifact state is read from its latest entry
"""

from .capacity import CapacityManager
from .entry import HISTORY_TEXT_MAX, HistoryEntry
from .history import CharacterHistory
from .log import EventLog, HistoryView, StaleViewError
from .recorder import EventRecorder
from .tags import ARTIFACT_TAGS, HistoryTag, tag_set
from .tracker import ArtifactTracker
from .unmask import unmask_unknown

__all__ = [
    "ARTIFACT_TAGS",
    "ArtifactTracker",
    "CapacityManager",
    "CharacterHistory",
    "EventLog",
    "EventRecorder",
    "HISTORY_TEXT_MAX",
    "HistoryEntry",
    "HistoryTag",
    "HistoryView",
    "StaleViewError",
    "tag_set",
    "unmask_unknown",
]
