"""Token-level OGDL rules: words, quoted values, comments and whitespace."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from .charsets import BREAK, SPACE, TEXT, WORD_CHARS, WORD_START
from .combinators import Parser, char_in, eof, literal


def _quoted(delimiter: str) -> Parser[str]:
    # no escape sequences, a quoted value cannot contain its delimiter
    chars = char_in(TEXT - delimiter).repeat().map("".join)
    return literal(delimiter).discard().sequence(chars).sequence(literal(delimiter).discard())


word_start: Parser[str] = char_in(WORD_START)
word_chars: Parser[str] = char_in(WORD_CHARS).repeat().map("".join)
word: Parser[str] = word_start.sequence(word_chars).map(lambda pair: pair[0] + pair[1])

single_quoted = _quoted("'")
double_quoted = _quoted('"')
quoted: Parser[str] = single_quoted.or_else(double_quoted)

value: Parser[str] = word.or_else(quoted)

br: Parser[Any] = char_in(BREAK).discard()
comment: Parser[Any] = literal("#").sequence(char_in(TEXT).repeat()).sequence(br.or_else(eof)).discard()

space = char_in(SPACE)
required_space: Parser[Any] = comment.or_else(space).repeat(1).discard()
optional_space: Parser[Any] = comment.or_else(space).repeat().discard()
separator: Parser[Any] = optional_space.sequence(literal(",")).sequence(optional_space).discard()


@lru_cache(maxsize=None)
def indentation(n: int) -> Parser[int]:
    """At least `n` whitespace characters; the value is how many were actually read."""
    return space.repeat(n).map(len)


__all__ = [
    "word",
    "quoted",
    "value",
    "br",
    "comment",
    "required_space",
    "optional_space",
    "separator",
    "indentation",
]
