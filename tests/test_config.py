"""Tests for loading history configuration from TOML."""

from __future__ import annotations

from pathlib import Path

import pytest

from chronicle.config import HistoryConfig, load_config
from chronicle.history import CharacterHistory, HistoryTag


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "chronicle.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = HistoryConfig()
    assert (config.birth_size, config.grow_step, config.max_entries) == (10, 10, 5000)


def test_load_reads_history_table(tmp_path: Path):
    path = _write(tmp_path, "[history]\nbirth_size = 4\ngrow_step = 2\nmax_entries = 8\n")
    config = load_config(path)
    assert config == HistoryConfig(birth_size=4, grow_step=2, max_entries=8)


def test_missing_keys_fall_back_to_defaults(tmp_path: Path):
    path = _write(tmp_path, "[history]\nmax_entries = 100\nextra = true\n")
    config = load_config(path)
    assert config == HistoryConfig(max_entries=100)


def test_missing_table_gives_defaults(tmp_path: Path):
    path = _write(tmp_path, "[other]\nkey = 1\n")
    assert load_config(path) == HistoryConfig()


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_malformed_toml(tmp_path: Path):
    path = _write(tmp_path, "[history\nbirth_size = ")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize("line", ["birth_size = 0", "grow_step = -5", "max_entries = \"many\"", "birth_size = true"])
def test_invalid_values(tmp_path: Path, line: str):
    path = _write(tmp_path, f"[history]\n{line}\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_config_drives_history_growth(tmp_path: Path):
    path = _write(tmp_path, "[history]\nbirth_size = 2\ngrow_step = 3\nmax_entries = 6\n")
    history = CharacterHistory(config=load_config(path))

    capacities = []
    for i in range(7):
        history.add_event_simple(f"note {i}", HistoryTag.USER_INPUT)
        capacities.append(history.capacity)

    assert capacities == [2, 2, 5, 5, 5, 6, 6]
    assert history.entry_count() == 6


def test_max_entries_above_limit_rejected():
    with pytest.raises(ValueError, match="at most 5000"):
        HistoryConfig(max_entries=5001)


def test_load_rejects_max_entries_above_limit(tmp_path: Path):
    path = _write(tmp_path, "[history]\nmax_entries = 6000\n")
    with pytest.raises(ValueError):
        load_config(path)
