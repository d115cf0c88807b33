"""CLI entrypoint for chronicle."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="chronicle")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
    help="Logging level for history diagnostics",
)
def cli(log_level: str) -> None:
    """chronicle - Character auto-history for roguelike sessions.

    Replay a session script and inspect the resulting history.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("script", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [history] table (birth_size, grow_step, max_entries)",
)
@click.option(
    "--unmask",
    is_flag=True,
    help="Reveal unidentified artifacts, as done for the final character dump",
)
@click.option("--json", "output_json", is_flag=True, help="Output the history as JSON")
@click.option("--dump", is_flag=True, help="Output the plain-text character dump block")
def replay(script: Path, config_path: Path | None, unmask: bool, output_json: bool, dump: bool) -> None:
    """Replay a YAML session script and show the resulting history.

    Examples:

        chronicle replay session.yml

        chronicle replay session.yml --unmask --dump
    """
    from .commands.replay_cmd import run_replay

    exit_code = run_replay(
        script,
        config_path=config_path,
        unmask=unmask,
        output_json=output_json,
        dump=dump,
    )
    sys.exit(exit_code)


@cli.command()
def tags() -> None:
    """List the history category tags."""
    from rich.console import Console
    from rich.table import Table

    from .history.tags import HistoryTag

    table = Table(title="History tags")
    table.add_column("tag", style="cyan", no_wrap=True)
    table.add_column("description")
    for tag in HistoryTag:
        table.add_row(tag.value, tag.description)
    Console().print(table)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
