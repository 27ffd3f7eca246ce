from __future__ import annotations

from tinyini.parsers.common import Visitor, flatten, for_each
from tinyini.parsers.errors import ErrorKind, ParseError
from tinyini.parsers.ini_parser import parse, parse_text
from tinyini.parsers.types import Document, Entry, ParseResult, Section

__all__ = [
    "Document",
    "Entry",
    "ErrorKind",
    "ParseError",
    "ParseResult",
    "Section",
    "Visitor",
    "flatten",
    "for_each",
    "parse",
    "parse_text",
]
