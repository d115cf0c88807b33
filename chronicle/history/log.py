"""
Append-only history storage.

Entries are stored in insertion order, which is also chronological order
and the only supported read order. Appending is the only way the log
grows; clear() is the only way it shrinks.

Views handed out by snapshot() are valid until the next mutating call
(append, flag change, clear). Reading a view after that raises
StaleViewError, so callers must re-snapshot instead of holding positions
across appends.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence, cast, overload

from .capacity import CapacityManager
from .entry import HistoryEntry
from .tags import HistoryTag

logger = logging.getLogger(__name__)


class StaleViewError(RuntimeError):
    """Raised when a history view is read after the log has changed."""


class HistoryView(Sequence[HistoryEntry]):
    """Read-only view over the live entries of an EventLog."""

    def __init__(self, log: EventLog, count: int, generation: int):
        self._log = log
        self._count = count
        self._generation = generation

    @property
    def is_stale(self) -> bool:
        return self._log._generation != self._generation

    def _check(self) -> None:
        if self.is_stale:
            raise StaleViewError("History changed since this view was taken; take a new snapshot")

    def __len__(self) -> int:
        self._check()
        return self._count

    @overload
    def __getitem__(self, index: int) -> HistoryEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[HistoryEntry]: ...

    def __getitem__(self, index: int | slice) -> HistoryEntry | list[HistoryEntry]:
        self._check()
        if isinstance(index, slice):
            return cast("list[HistoryEntry]", self._log._slots[: self._count][index])
        position = index + self._count if index < 0 else index
        if not 0 <= position < self._count:
            raise IndexError(f"History view index out of range: {index}")
        return cast(HistoryEntry, self._log._slots[position])

    def __iter__(self) -> Iterator[HistoryEntry]:
        self._check()
        live = cast("list[HistoryEntry]", self._log._slots[: self._count])
        for entry in live:
            self._check()
            yield entry

    def __repr__(self) -> str:
        state = "stale" if self.is_stale else "live"
        return f"<HistoryView {self._count} entries ({state})>"


class EventLog:
    """
    Ordered log of history entries.

    INVARIANT: Entries keep their position once appended. Only their flags
    may change afterwards, via replace_flags().
    """

    def __init__(self, capacity: CapacityManager | None = None):
        self._capacity = capacity or CapacityManager()
        self._slots: list[HistoryEntry | None] = []
        self._count = 0
        self._generation = 0

        # artifact_id -> positions in insertion order
        self._by_artifact_id: dict[int, list[int]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity.capacity

    @property
    def max_entries(self) -> int:
        return self._capacity.max_entries

    def count(self) -> int:
        """Number of live entries."""
        return self._count

    def append(self, entry: HistoryEntry) -> bool:
        """
        Append an entry at the end of the log.

        Returns:
            False if the log is full at its maximum size and the entry was
            dropped, True otherwise
        """
        if not self._capacity.ensure_room(self._count):
            return False

        if len(self._slots) < self._capacity.capacity:
            self._slots.extend([None] * (self._capacity.capacity - len(self._slots)))

        position = self._count
        self._slots[position] = entry
        if entry.artifact_id:
            self._by_artifact_id.setdefault(entry.artifact_id, []).append(position)

        self._count += 1
        self._generation += 1
        return True

    def entry_at(self, position: int) -> HistoryEntry:
        if not 0 <= position < self._count:
            raise IndexError(f"No history entry at position {position}")
        return cast(HistoryEntry, self._slots[position])

    def positions_for(self, artifact_id: int) -> Sequence[int]:
        """Positions of entries for an artifact, oldest first."""
        return self._by_artifact_id.get(artifact_id, ())

    def replace_flags(self, position: int, flags: Iterable[HistoryTag | str]) -> HistoryEntry:
        """
        Replace the flags of the entry at `position`, keeping everything else.

        Returns:
            The entry now stored at that position
        """
        entry = self.entry_at(position)
        updated = entry.with_flags(flags)
        if updated.flags != entry.flags:
            self._slots[position] = updated
            self._generation += 1
        return updated

    def snapshot(self) -> tuple[HistoryView, int]:
        """
        Read-only view over the live entries, and their count.

        The view is for display; it goes stale on the next mutation.
        """
        return HistoryView(self, self._count, self._generation), self._count

    def iter_entries(self) -> Iterator[HistoryEntry]:
        """Iterate over entries in chronological order."""
        view, _ = self.snapshot()
        return iter(view)

    def clear(self) -> None:
        """Drop all entries and release the storage."""
        if self._count:
            logger.debug("Clearing %d history entries", self._count)
        self._slots = []
        self._count = 0
        self._by_artifact_id.clear()
        self._capacity.reset()
        self._generation += 1
