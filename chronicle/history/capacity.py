"""
Capacity policy for the history storage.

Storage starts empty, is allocated at birth size on first use and then
grows by a fixed step, never past the hard maximum. It never shrinks
except through reset().
"""

from __future__ import annotations

import logging

from ..config import HISTORY_BIRTH_SIZE, HISTORY_GROW_STEP, HISTORY_MAX

logger = logging.getLogger(__name__)


class CapacityManager:
    """Tracks the current storage size and decides when it may grow."""

    def __init__(
        self,
        birth_size: int = HISTORY_BIRTH_SIZE,
        grow_step: int = HISTORY_GROW_STEP,
        max_entries: int = HISTORY_MAX,
    ):
        if birth_size <= 0 or grow_step <= 0 or max_entries <= 0:
            raise ValueError("birth_size, grow_step and max_entries must be > 0")
        self.birth_size = min(birth_size, max_entries)
        self.grow_step = grow_step
        self.max_entries = max_entries
        self.capacity = 0

    def ensure_room(self, count: int) -> bool:
        """
        Make sure one more entry fits after `count` live entries.

        Args:
            count: Number of entries currently stored

        Returns:
            True if there is room (possibly after growing), False if the
            storage is full at max_entries
        """
        if count < self.capacity:
            return True

        if self.capacity == 0:
            return self._set_capacity(self.birth_size)

        return self._set_capacity(self.capacity + self.grow_step)

    def _set_capacity(self, size: int) -> bool:
        size = min(size, self.max_entries)
        if size <= self.capacity:
            logger.debug("History is full at %d entries", self.capacity)
            return False

        logger.debug("Growing history capacity %d -> %d", self.capacity, size)
        self.capacity = size
        return True

    def reset(self) -> None:
        self.capacity = 0

    @property
    def is_full(self) -> bool:
        return self.capacity >= self.max_entries
