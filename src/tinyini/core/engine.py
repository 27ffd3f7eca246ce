from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

from tinyini.core.files import read_ini_file
from tinyini.core.models import CheckConfig, CheckResult, FileIssue, IssueKind
from tinyini.parsers import ErrorKind, ParseError, ParseResult

logger = logging.getLogger(__name__)

# Loads and parses one file; OSError means the file could not be opened.
FileReader = Callable[..., ParseResult]

_ISSUE_KINDS = {
    ErrorKind.SYNTAX: IssueKind.SYNTAX,
    ErrorKind.READ: IssueKind.READ,
}


def issues_from_errors(file: str, errors: Sequence[ParseError]) -> List[FileIssue]:
    return [
        FileIssue(file=file, kind=_ISSUE_KINDS[e.kind], message=e.message, line=e.line)
        for e in errors
    ]


def run_check(
    paths: Iterable[Path],
    config: CheckConfig,
    *,
    read: FileReader = read_ini_file,
) -> CheckResult:
    """
    Parse every file and gather their problems into one CheckResult.
    A file that fails to open is recorded and the batch goes on.
    """
    t0 = time.perf_counter()
    result = CheckResult(started_at=datetime.now(timezone.utc))

    path_list = [Path(p) for p in paths]
    if config.deterministic:
        path_list.sort(key=str)
    result.stats.files_considered = len(path_list)

    issues: List[FileIssue] = []

    for path in path_list:
        name = str(path)
        result.files.append(name)
        try:
            parsed = read(path, encoding=config.encoding)
        except OSError as e:
            logger.debug("cannot open %s: %s", name, e)
            issues.append(FileIssue(file=name, kind=IssueKind.OPEN, message=str(e)))
            continue

        result.stats.files_checked += 1
        result.stats.sections += len(parsed.document)
        result.stats.entries += sum(1 for _ in parsed.document.entries())

        issues.extend(issues_from_errors(name, parsed.errors))

    result.issues = issues
    result.stats.errors = len(issues)
    result.stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    result.finished_at = datetime.now(timezone.utc)
    return result
