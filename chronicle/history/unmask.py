"""End-of-session reveal of unidentified artifacts."""

from __future__ import annotations

import logging

from .log import EventLog
from .tags import HistoryTag

logger = logging.getLogger(__name__)


def unmask_unknown(log: EventLog) -> int:
    """
    Turn every unknown-artifact tag into a known-artifact tag.

    Meant for the final character dump after death or retirement. Other
    tags on the entry are kept.

    Returns:
        Number of entries changed (0 when there was nothing left to reveal)
    """
    changed = 0
    for position in range(log.count()):
        entry = log.entry_at(position)
        if not entry.has(HistoryTag.ARTIFACT_UNKNOWN):
            continue
        flags = (entry.flags - {HistoryTag.ARTIFACT_UNKNOWN}) | {HistoryTag.ARTIFACT_KNOWN}
        log.replace_flags(position, flags)
        changed += 1

    if changed:
        logger.info("Revealed %d unknown artifact entries", changed)
    return changed
