"""
tinyini: a bare-bones parser for INI-like configuration files.

    result = tinyini.parse(open("app.ini", encoding="utf-8"))
    if not result.ok:
        ...
    result.document.for_each(lambda section, key, value: True)
"""
from __future__ import annotations

from tinyini.parsers import (
    Document,
    Entry,
    ErrorKind,
    ParseError,
    ParseResult,
    Section,
    flatten,
    for_each,
    parse,
    parse_text,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Entry",
    "ErrorKind",
    "ParseError",
    "ParseResult",
    "Section",
    "flatten",
    "for_each",
    "parse",
    "parse_text",
]
