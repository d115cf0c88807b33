"""
History configuration.

Settings live in the [history] table of a TOML file:

    [history]
    birth_size = 10
    grow_step = 10
    max_entries = 5000

max_entries may be lowered but not raised past HISTORY_MAX.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

HISTORY_BIRTH_SIZE = 10
HISTORY_GROW_STEP = 10
HISTORY_MAX = 5000


@dataclass(frozen=True)
class HistoryConfig:
    """Sizing policy for a session's history."""

    birth_size: int = HISTORY_BIRTH_SIZE
    grow_step: int = HISTORY_GROW_STEP
    max_entries: int = HISTORY_MAX

    def __post_init__(self) -> None:
        for name in ("birth_size", "grow_step", "max_entries"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.max_entries > HISTORY_MAX:
            raise ValueError(f"max_entries must be at most {HISTORY_MAX}, got {self.max_entries}")


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def load_config(path: str | Path) -> HistoryConfig:
    """
    Load history settings from TOML.

    Missing keys fall back to the defaults; unknown keys are ignored.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the TOML is malformed or a value is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse config TOML: {e}") from e

    section = _coerce_dict(data.get("history"))
    defaults = HistoryConfig()
    return HistoryConfig(
        birth_size=section.get("birth_size", defaults.birth_size),
        grow_step=section.get("grow_step", defaults.grow_step),
        max_entries=section.get("max_entries", defaults.max_entries),
    )
