"""
Tests for artifact state tracking.

Validates backward search semantics:
- The most recent entry for an artifact is the one found and changed
- mark_known searches lost entries too, is_active skips them
- Missing entries are reported, not raised
"""

from __future__ import annotations

import pytest

from chronicle.history.entry import HistoryEntry
from chronicle.history.log import EventLog
from chronicle.history.tags import HistoryTag
from chronicle.history.tracker import ArtifactTracker


def _append(log: EventLog, artifact_id: int, *tags: HistoryTag, text: str = "") -> None:
    log.append(HistoryEntry.build(tags, artifact_id=artifact_id, text=text))


@pytest.fixture
def log() -> EventLog:
    return EventLog()


@pytest.fixture
def tracker(log: EventLog) -> ArtifactTracker:
    return ArtifactTracker(log)


def test_mark_known_without_entry_fails(tracker: ArtifactTracker):
    assert not tracker.mark_known(5)


def test_mark_known_reduces_flags_to_known(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.GENERIC)

    assert tracker.mark_known(5)
    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_KNOWN}
    assert tracker.is_known(5)


def test_mark_known_is_idempotent(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN)

    tracker.mark_known(5)
    first = log.entry_at(0)
    assert tracker.mark_known(5)
    assert log.entry_at(0) == first
    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_KNOWN}


def test_mark_known_updates_most_recent_entry(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.ARTIFACT_LOST, text="old")
    _append(log, 9, HistoryTag.ARTIFACT_UNKNOWN)
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, text="new")

    tracker.mark_known(5)

    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.ARTIFACT_LOST}
    assert log.entry_at(1).flags == {HistoryTag.ARTIFACT_UNKNOWN}
    assert log.entry_at(2).flags == {HistoryTag.ARTIFACT_KNOWN}


def test_mark_known_reaches_lost_entries(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.ARTIFACT_LOST)

    assert tracker.mark_known(5)
    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_KNOWN}


def test_mark_lost_adds_tag_and_keeps_others(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_KNOWN)

    assert tracker.mark_lost(5)
    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_KNOWN, HistoryTag.ARTIFACT_LOST}


def test_mark_lost_without_entry_reports_false(log: EventLog, tracker: ArtifactTracker):
    assert not tracker.mark_lost(5)
    assert log.count() == 0


def test_mark_lost_on_already_lost_entry(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.ARTIFACT_LOST)

    assert tracker.mark_lost(5)
    assert log.entry_at(0).flags == {HistoryTag.ARTIFACT_UNKNOWN, HistoryTag.ARTIFACT_LOST}


def test_is_known_looks_at_every_entry(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_KNOWN, HistoryTag.ARTIFACT_LOST)
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN)

    assert tracker.is_known(5)
    assert not tracker.is_known(6)


def test_is_active_skips_lost_entries(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_KNOWN, HistoryTag.ARTIFACT_LOST)
    assert not tracker.is_active(5)

    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN)
    assert tracker.is_active(5)
    assert tracker.latest_position(5, skip_lost=True) == 1


def test_latest_entry(log: EventLog, tracker: ArtifactTracker):
    _append(log, 5, HistoryTag.ARTIFACT_UNKNOWN, text="first")
    _append(log, 5, HistoryTag.ARTIFACT_LOST, text="second")

    assert tracker.latest_entry(5).text == "second"
    assert tracker.latest_entry(5, skip_lost=True).text == "first"
    assert tracker.latest_entry(8) is None


@pytest.mark.parametrize("bad_id", [0, -3])
def test_invalid_artifact_id_is_a_precondition_error(tracker: ArtifactTracker, bad_id: int):
    with pytest.raises(ValueError):
        tracker.mark_known(bad_id)
    with pytest.raises(ValueError):
        tracker.is_known(bad_id)
