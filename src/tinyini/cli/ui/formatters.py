from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tinyini.core.models import CheckResult, FileIssue, IssueKind
from tinyini.parsers import Document


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def _section_label(name: str) -> Text:
    # the global section has no name
    if not name:
        return Text("(global)", style="muted")
    return Text(name, style="section")


# ----------------------------
# Entries
# ----------------------------

@dataclass(frozen=True)
class EntriesRenderOptions:
    title: Optional[str] = None
    section: Optional[str] = None   # only this section when set
    show_lines: bool = True
    max_rows: Optional[int] = None  # show only first N rows (still prints count)


def render_entries_table(
    console: Console,
    document: Document,
    *,
    opts: Optional[EntriesRenderOptions] = None,
) -> None:
    opts = opts or EntriesRenderOptions()

    rows = [
        (section, key, entry)
        for section, key, entry in document.entries()
        if opts.section is None or section == opts.section
    ]

    if not rows:
        console.print("[muted]No entries.[/muted]")
        return

    total = len(rows)
    show = rows
    if opts.max_rows is not None:
        show = rows[: int(opts.max_rows)]

    table = Table(title=opts.title or f"Entries ({total})", show_lines=False)
    table.add_column("Section", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")
    if opts.show_lines:
        table.add_column("Line", justify="right", no_wrap=True)

    for section, key, entry in show:
        # Text() so values like "[x]" are not read as rich markup
        row = [_section_label(section), Text(key), Text(_short(entry.value))]
        if opts.show_lines:
            row.append(str(entry.line))
        table.add_row(*row)

    console.print(table)

    if total > len(show):
        console.print(f"[muted]… showing {len(show)} of {total} entries.[/muted]")


# ----------------------------
# Issues
# ----------------------------

def _location(issue: FileIssue) -> str:
    if issue.kind == IssueKind.OPEN or issue.line is None:
        return issue.file
    return f"{issue.file}:{issue.line}"


def render_issues(
    console: Console,
    issues: Sequence[FileIssue],
    *,
    max_items: int = 25,
) -> None:
    if not issues:
        console.print("[ok]No problems found.[/ok]")
        return

    shown = list(issues)[:max_items]

    table = Table(title=f"Problems ({len(issues)})", show_lines=False)
    table.add_column("Location", style="path", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Message")

    for issue in shown:
        style = "warn" if issue.kind == IssueKind.SYNTAX else "err"
        table.add_row(_location(issue), Text(issue.kind.value, style=style), Text(issue.message))

    console.print(table)

    if len(issues) > len(shown):
        console.print(f"[muted]… and {len(issues) - len(shown)} more[/muted]")


# ----------------------------
# Summary
# ----------------------------

def render_check_summary(
    console: Console,
    result: CheckResult,
    *,
    header: str = "Summary",
) -> None:
    s = result.stats

    cols: List[str] = [
        "files_considered",
        "files_checked",
        "sections",
        "entries",
        "errors",
        "duration_ms",
    ]
    vals: List[str] = [
        str(s.files_considered),
        str(s.files_checked),
        str(s.sections),
        str(s.entries),
        str(s.errors),
        str(s.duration_ms),
    ]

    table = Table(title=header, show_header=True, show_lines=False)
    for c in cols:
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(*vals)

    console.print()
    console.print(table)
