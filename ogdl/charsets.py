"""Unicode character classes used by the OGDL grammar."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Callable

LINE_BREAKS = "\n\x0b\x0c\r\x85\u2028\u2029"


@dataclass(frozen=True, slots=True)
class CharacterSet:
    """An immutable set of characters described by a membership predicate.

    Subtracting a string removes those literal characters, subtracting another
    set removes all of its members. Both return a new set.
    """

    name: str
    predicate: Callable[[str], bool]
    excluded: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, char: str) -> bool:
        return char not in self.excluded and self.predicate(char)

    def __sub__(self, other: "str | CharacterSet") -> "CharacterSet":
        if isinstance(other, str):
            return CharacterSet(f"{self.name} - {other!r}", self.predicate, self.excluded | frozenset(other))
        if isinstance(other, CharacterSet):
            return CharacterSet(f"{self.name} - {other.name}", lambda char: char in self and char not in other)
        return NotImplemented


CONTROL = CharacterSet("control", lambda char: unicodedata.category(char) in {"Cc", "Cf"})
SPACE = CharacterSet("whitespace", lambda char: char == "\t" or unicodedata.category(char) == "Zs")
BREAK = CharacterSet("line-break", lambda char: char in LINE_BREAKS)
ANY = CharacterSet("any", lambda char: True)

TEXT = ANY - CONTROL - BREAK
WORD = TEXT - ",()" - SPACE
WORD_START = WORD - "#'\""
WORD_CHARS = WORD - "'\""


__all__ = [
    "CharacterSet",
    "CONTROL",
    "SPACE",
    "BREAK",
    "ANY",
    "TEXT",
    "WORD",
    "WORD_START",
    "WORD_CHARS",
]
