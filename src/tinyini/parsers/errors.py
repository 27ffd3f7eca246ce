from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    SYNTAX = "syntax"
    READ = "read"


@dataclass(frozen=True)
class ParseError:
    """
    A recoverable problem found while parsing.

    SYNTAX errors point at the offending line. A READ error is appended last
    when the line source fails; its line is the count of lines consumed so far.
    """
    message: str
    line: int
    kind: ErrorKind = ErrorKind.SYNTAX

    def __str__(self) -> str:
        return f"{self.line}: {self.message}"
