from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Tuple

from tinyini.parsers.common import Visitor, flatten, for_each
from tinyini.parsers.errors import ParseError


@dataclass(frozen=True)
class Entry:
    """ One value of a key together with the 1-based line it came from."""
    value: str
    line: int


Section = Dict[str, List[Entry]]


class Document(Dict[str, Section]):
    """
    Section name -> key -> entries. The global section is keyed by "".

    A plain dict underneath, so it compares equal to nested dict literals.
    """

    def add(self, section: str, key: str, entry: Entry) -> None:
        self.setdefault(section, {}).setdefault(key, []).append(entry)

    def get_values(self, section: str, key: str) -> List[str]:
        return [e.value for e in self.get(section, {}).get(key, [])]

    def entries(self) -> Iterator[Tuple[str, str, Entry]]:
        return flatten(self)

    def for_each(self, callback: Visitor) -> bool:
        return for_each(self, callback)


class ParseResult(NamedTuple):
    document: Document
    errors: List[ParseError]

    @property
    def ok(self) -> bool:
        return not self.errors
