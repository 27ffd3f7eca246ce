from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tinyini.core.config import LoadedConfig, load_config
from tinyini.core.errors import ExitCode


def load_config_or_exit(
    console: Console,
    *,
    start_dir: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Load config for a command. Broken TOML or rejected values end the
    command with ExitCode.USAGE.
    """
    try:
        return load_config(start_dir or Path.cwd(), cli_overrides=cli_overrides)
    except ValueError as e:
        # tomllib.TOMLDecodeError and pydantic.ValidationError are both ValueErrors
        console.print(f"[err]Invalid configuration:[/err] {escape(str(e))}")
        raise typer.Exit(code=int(ExitCode.USAGE))
