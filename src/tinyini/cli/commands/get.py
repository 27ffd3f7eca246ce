from __future__ import annotations

from pathlib import Path

import typer

from tinyini.cli.ui import get_ui, setup_logging
from tinyini.cli.utils.config import load_config_or_exit
from tinyini.cli.utils.reading import read_or_exit
from tinyini.core.errors import ExitCode


def get_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="INI file to read."),
    key: str = typer.Argument(..., help="Key to look up."),
    section: str = typer.Option(
        "", "--section", "-s", help="Section holding the key (default: global)."
    ),
    all_values: bool = typer.Option(
        False, "--all", help="Print every value of the key, one per line."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print the value of KEY; the last one wins unless --all is given."""
    setup_logging(verbose)
    console = get_ui(verbose=verbose).console

    loaded_cfg = load_config_or_exit(console)
    result = read_or_exit(console, file, encoding=loaded_cfg.config.encoding)

    # values are picked up even when other lines of the file are broken
    values = result.document.get_values(section, key)
    if not values:
        typer.echo(f"{key}: not found", err=True)
        raise typer.Exit(code=int(ExitCode.ERRORS))

    for v in values if all_values else values[-1:]:
        typer.echo(v)
