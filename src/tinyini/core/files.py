from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator, Union

from tinyini.parsers import ParseResult, parse


def _decoded_lines(fh: BinaryIO, encoding: str) -> Iterator[str]:
    # binary iteration ends lines at b"\n" only; a bad byte fails on its own line
    for raw in fh:
        yield raw.decode(encoding)


def read_ini_file(path: Union[str, Path], *, encoding: str = "utf-8") -> ParseResult:
    """
    Stream a file through the parser. Open failures raise OSError;
    a line that does not decode ends the parse with a READ error that
    keeps every entry above it.

    Lines are split on bytes, so `encoding` must be ASCII-compatible
    (utf-8, latin-1, cp1252, ...).
    """
    with open(path, "rb") as fh:
        return parse(_decoded_lines(fh, encoding))
