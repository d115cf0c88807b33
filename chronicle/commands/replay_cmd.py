"""Session replay CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from ..config import HistoryConfig, load_config
from ..context import SessionState
from ..dump import format_history, history_table, is_displayed
from ..history.history import CharacterHistory
from ..replay import SessionReplayer, load_script


def run_replay(
    script_path: Path,
    *,
    config_path: Path | None = None,
    unmask: bool = False,
    output_json: bool = False,
    dump: bool = False,
) -> int:
    console = Console()
    err = Console(stderr=True)

    try:
        config = load_config(config_path) if config_path else HistoryConfig()
        script = load_script(script_path)
        state = SessionState()
        history = CharacterHistory(state, config=config)
        outcomes = SessionReplayer(script, history, state).run()
    except (FileNotFoundError, ValueError) as e:
        err.print(str(e), style="bold red")
        return 1

    if unmask:
        history.unmask_unknown()

    entries, count = history.get_entries()

    if output_json:
        data = {
            "entry_count": count,
            "capacity": history.capacity,
            "entries": [entry.to_dict() for entry in entries],
            "steps": [
                {"index": o.step.index, "action": o.step.action, "recorded": o.recorded}
                for o in outcomes
            ],
        }
        print(json.dumps(data, indent=2, sort_keys=True))
        return 0

    if dump:
        print(format_history(entries), end="")
        return 0

    console.print(history_table(entries))
    hidden = sum(1 for e in entries if not is_displayed(e))
    console.print(f"{count} entries (capacity {history.capacity})", style="dim")
    if hidden:
        console.print(f"{hidden} unidentified artifact entries hidden (use --unmask)", style="dim")
    return 0
