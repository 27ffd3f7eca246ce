from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ERRORS = 1  # parse issues found (or requested key missing)
    USAGE = 2   # bad arguments / invalid config
