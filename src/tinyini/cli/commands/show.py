from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tinyini.cli.ui import EntriesRenderOptions, get_ui, render_entries_table, render_issues, setup_logging
from tinyini.cli.utils.config import load_config_or_exit
from tinyini.cli.utils.reading import read_or_exit
from tinyini.core.engine import issues_from_errors
from tinyini.core.errors import ExitCode


def show_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="INI file to show."),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help='Only this section ("" for the global one).'
    ),
    max_rows: Optional[int] = typer.Option(
        None, "--max-rows", min=1, help="Show at most N entries (overrides config if set)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print every section/key/value of a file as a table."""
    setup_logging(verbose)
    console = get_ui(verbose=verbose).console

    cli_overrides = {"ui": {}}
    if max_rows is not None:
        cli_overrides["ui"]["max_rows"] = max_rows

    loaded_cfg = load_config_or_exit(console, cli_overrides=cli_overrides)
    ui_cfg = loaded_cfg.ui_config

    result = read_or_exit(console, file, encoding=loaded_cfg.config.encoding)

    render_entries_table(
        console,
        result.document,
        opts=EntriesRenderOptions(
            title=str(file),
            section=section,
            show_lines=ui_cfg.show_lines,
            max_rows=ui_cfg.max_rows,
        ),
    )

    if not result.ok:
        issues = issues_from_errors(str(file), result.errors)
        render_issues(console, issues, max_items=loaded_cfg.config.max_errors)
        raise typer.Exit(code=int(ExitCode.ERRORS))
