from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator, List, Mapping, Tuple

if TYPE_CHECKING:
    from tinyini.parsers.types import Entry

# Receives (section, key, value); a falsy return stops the traversal.
Visitor = Callable[[str, str, str], bool]


def flatten(document: Mapping[str, Mapping[str, List["Entry"]]]) -> Iterator[Tuple[str, str, "Entry"]]:
    """
    Walk a parsed document as (section, key, entry) triples.

    Sections and keys come in mapping order, entries of one key in source order:
      {"s": {"k": [Entry("a", 2), Entry("b", 3)]}} -> ("s", "k", Entry("a", 2)), ("s", "k", Entry("b", 3))
    """
    for section, keys in document.items():
        for key, entries in keys.items():
            for entry in entries:
                yield section, key, entry


def for_each(document: Mapping[str, Mapping[str, List["Entry"]]], callback: Visitor) -> bool:
    """
    Call `callback(section, key, value)` for every stored value.

    Returns False as soon as the callback returns a falsy value, True when
    every value was visited.
    """
    for section, key, entry in flatten(document):
        if not callback(section, key, entry.value):
            return False
    return True
