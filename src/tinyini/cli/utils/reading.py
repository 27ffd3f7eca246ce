from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from tinyini.core.errors import ExitCode
from tinyini.core.files import read_ini_file
from tinyini.parsers import ParseResult


def read_or_exit(console: Console, path: Path, *, encoding: str) -> ParseResult:
    """
    Parse one file for a command; a file that cannot be opened ends the
    command with ExitCode.ERRORS.
    """
    try:
        return read_ini_file(path, encoding=encoding)
    except OSError as e:
        console.print(f"[err]Cannot open {escape(str(path))}:[/err] {escape(str(e))}")
        raise typer.Exit(code=int(ExitCode.ERRORS))
