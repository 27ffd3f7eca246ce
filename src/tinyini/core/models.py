from __future__ import annotations

import codecs
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ================================
# Enums
# ================================


class IssueKind(str, Enum):
    SYNTAX = "syntax"
    READ = "read"
    OPEN = "open"


# ================================
# Check config (defaults only)
# ================================

DEFAULT_MAX_ERRORS = 25


class CheckConfig(BaseModel):
    """
    Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py (do NOT load config in defaults).
    """

    fail_on_errors: bool = True
    max_errors: int = Field(default=DEFAULT_MAX_ERRORS, ge=1)
    encoding: str = Field(default="utf-8", min_length=1)
    deterministic: bool = True

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v


# ================================
# UI config (defaults only)
# ================================


class UIConfig(BaseModel):
    show_lines: bool = Field(
        default=True, description="Show the source line column in tables."
    )
    max_rows: Optional[int] = Field(
        default=None, ge=1, description="Truncate entry tables after N rows."
    )


# ================================
# Check results
# ================================


class FileIssue(BaseModel):
    file: str
    kind: IssueKind
    message: str
    line: Optional[int] = None


class CheckStats(BaseModel):
    files_considered: int = 0
    files_checked: int = 0
    sections: int = 0
    entries: int = 0
    errors: int = 0
    duration_ms: int = 0


class CheckResult(BaseModel):
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    files: List[str] = Field(default_factory=list)
    issues: List[FileIssue] = Field(default_factory=list)
    stats: CheckStats = Field(default_factory=CheckStats)

    @model_validator(mode="after")
    def _fixup_counts(self) -> "CheckResult":
        self.stats.errors = len(self.issues)
        return self

    @property
    def ok(self) -> bool:
        return not self.issues
