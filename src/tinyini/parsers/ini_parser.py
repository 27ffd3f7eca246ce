from __future__ import annotations

import logging
import re
from typing import Iterable, List

from tinyini.parsers.errors import ErrorKind, ParseError
from tinyini.parsers.types import Document, Entry, ParseResult

logger = logging.getLogger(__name__)

NOT_SECTION_NOR_KV = "not section nor key-value"

# ASCII whitespace only, like \s under re.ASCII
_WS = " \t\n\r\f\v"

# Tried in this order; the first match classifies the line.
_COMMENT_RE = re.compile(r"^\s*;", re.ASCII)
_KEYVAL_QUOTED_RE = re.compile(r'^\s*(.+?)\s*=\s*"((?:\\.|[^"\\])*)"\s*(?:;.*)?$', re.ASCII)
_KEYVAL_RE = re.compile(r"^\s*(.+?)\s*=\s*(.*?)\s*(?:;.*)?$", re.ASCII)
_SECTION_RE = re.compile(r"^\s*\[(.+?)\]", re.ASCII)
_EMPTY_RE = re.compile(r"^\s*$", re.ASCII)


def _unescape(body: str) -> str:
    # only \" is decoded; \n, \\ etc. stay as written
    return body.replace('\\"', '"')


def _strip_eol(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def parse(lines: Iterable[str]) -> ParseResult:
    """
    Parse INI-like lines into a Document plus the errors met on the way.

    Lines may still carry their newline (e.g. an open text file). Parsing
    never stops on a bad line, so callers check `result.ok` (or that the
    error list is empty) rather than catching exceptions:

      [section]
      key = first            -> {"section": {"key": [Entry("first", 2), ...]}}
      key = "quoted \\" ; x"  -> Entry('quoted " ; x', 3)
      garbage                -> ParseError("not section nor key-value", 4)

    If iterating `lines` fails, a single READ error is appended and the
    document built so far is returned.
    """
    if isinstance(lines, str):
        return parse_text(lines)

    document = Document()
    errors: List[ParseError] = []
    cursection = ""
    lineno = 0

    it = iter(lines)
    while True:
        try:
            raw = next(it)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("line source failed after line %d: %s", lineno, e)
            errors.append(ParseError(message=str(e), line=lineno, kind=ErrorKind.READ))
            break

        lineno += 1
        line = _strip_eol(raw)

        if _COMMENT_RE.match(line):
            continue

        m = _KEYVAL_QUOTED_RE.match(line)
        if m:
            document.add(cursection, m.group(1).strip(_WS), Entry(_unescape(m.group(2)), lineno))
            continue

        m = _KEYVAL_RE.match(line)
        if m:
            document.add(cursection, m.group(1).strip(_WS), Entry(m.group(2).strip(_WS), lineno))
            continue

        m = _SECTION_RE.match(line)
        if m:
            cursection = m.group(1)
            logger.debug("line %d: entering section %r", lineno, cursection)
            continue

        if _EMPTY_RE.match(line):
            continue

        logger.debug("line %d: %s: %r", lineno, NOT_SECTION_NOR_KV, line)
        errors.append(ParseError(message=NOT_SECTION_NOR_KV, line=lineno))

    return ParseResult(document=document, errors=errors)


def parse_text(text: str) -> ParseResult:
    """Parse an in-memory string; a final newline does not start another line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse(lines)
