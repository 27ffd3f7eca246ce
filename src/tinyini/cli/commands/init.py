from __future__ import annotations

from pathlib import Path

import typer

from tinyini.cli.utils.files import ensure_dir, write_file
from tinyini.core.config import REPO_CONFIG_FILE


DEFAULT_CONFIG_TOML = """\
[check]
# exit 1 when any checked file has problems
fail_on_errors = true
# problems listed before the output is cut short
max_errors = 25
encoding = "utf-8"
# check files in sorted order
deterministic = true

[ui]
show_lines = true
# max_rows = 200
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write a default .tinyini.toml."""
    root = path.resolve()
    ensure_dir(root)

    target = root / REPO_CONFIG_FILE
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"{target} already exists (use --force to overwrite)")
