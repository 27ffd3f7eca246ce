from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from tinyini.cli.ui.formatters import (
    EntriesRenderOptions,
    render_check_summary,
    render_entries_table,
    render_issues,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(console=Console(theme=THEME), verbose=verbose)


def setup_logging(verbose: bool) -> None:
    # library modules never add handlers
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


__all__ = [
    "THEME",
    "UI",
    "EntriesRenderOptions",
    "get_ui",
    "render_check_summary",
    "render_entries_table",
    "render_issues",
    "setup_logging",
]
