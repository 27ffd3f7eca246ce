from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from tinyini.cli.ui import get_ui, render_check_summary, render_issues, setup_logging
from tinyini.cli.utils.config import load_config_or_exit
from tinyini.core.engine import run_check
from tinyini.core.errors import ExitCode


def check_cmd(
    files: List[Path] = typer.Argument(..., help="INI files to check."),
    fail: Optional[bool] = typer.Option(
        None,
        "--fail/--no-fail",
        help="Exit 1 if any file has problems (overrides config if set).",
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", help="Text encoding of the files (overrides config if set)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Report syntax and read errors of INI files."""
    setup_logging(verbose)
    ui = get_ui(verbose=verbose)
    console = ui.console

    cli_overrides = {"check": {}}
    if fail is not None:
        cli_overrides["check"]["fail_on_errors"] = bool(fail)
    if encoding is not None:
        cli_overrides["check"]["encoding"] = encoding

    loaded_cfg = load_config_or_exit(console, cli_overrides=cli_overrides)
    cfg = loaded_cfg.config

    if ui.verbose:
        console.print("[bold]Config sources:[/bold]")
        console.print(f"  global: {loaded_cfg.global_path or '-'}")
        console.print(f"  repo:   {loaded_cfg.repo_path or '-'}")
        console.print()

    result = run_check(files, cfg)

    render_issues(console, result.issues, max_items=cfg.max_errors)
    if ui.verbose:
        render_check_summary(console, result, header="Summary")

    if result.issues and cfg.fail_on_errors:
        raise typer.Exit(code=int(ExitCode.ERRORS))

    raise typer.Exit(code=int(ExitCode.OK))
