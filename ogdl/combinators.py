"""Parser combinators over an immutable text and a cursor position.

A parser is called with ``(text, position)`` and returns either
``(value, new_position)`` or ``None`` when it does not match. Failure carries
no diagnostic and never raises.

Usage:
```
word = char_in(WORD).repeat(1).map("".join)
pair = word.sequence(literal(",").discard()).sequence(word)

pair("12,34")   # => (("12", "34"), 5)
pair("12;34")   # => None
```
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache, lru_cache
from typing import Any, Callable, Generic, TypeVar

from .charsets import CharacterSet

T = TypeVar("T")
U = TypeVar("U")

ParseResult = tuple[T, int] | None


class _Discarded:
    """Marker value produced by discarded parsers; dropped by `Parser.sequence`."""

    def __repr__(self) -> str:
        return "DISCARDED"


DISCARDED: Any = _Discarded()


def _combine(left: Any, right: Any) -> Any:
    if left is DISCARDED:
        return right
    if right is DISCARDED:
        return left
    return (left, right)


@dataclass(frozen=True, slots=True)
class Parser(Generic[T]):
    function: Callable[[str, int], "ParseResult[T]"]

    def __call__(self, text: str, position: int = 0) -> "ParseResult[T]":
        return self.function(text, position)

    def sequence(self, other: "Parser[Any]") -> "Parser[Any]":
        """Runs `self` then `other` on the remainder; the value is a pair unless one side was discarded."""

        def run(text: str, position: int):
            left = self.function(text, position)
            if left is None:
                return None
            right = other.function(text, left[1])
            if right is None:
                return None
            return _combine(left[0], right[0]), right[1]

        return Parser(run)

    def or_else(self, other: "Parser[U]") -> "Parser[T | U]":
        """Ordered choice. `other` only runs, from the same position, when `self` fails."""

        def run(text: str, position: int):
            result = self.function(text, position)
            if result is not None:
                return result
            return other.function(text, position)

        return Parser(run)

    def repeat(self, minimum: int = 0, maximum: int | None = None) -> "Parser[list[T]]":
        """Greedy repetition, at least `minimum` and fewer than `maximum` times."""

        def run(text: str, position: int):
            values: list[T] = []
            while maximum is None or len(values) < maximum - 1:
                result = self.function(text, position)
                if result is None:
                    break
                values.append(result[0])
                if result[1] == position:
                    # zero-width match, repeating would never advance
                    break
                position = result[1]
            if len(values) < minimum:
                return None
            return values, position

        return Parser(run)

    def optional(self) -> "Parser[T | None]":
        return self.repeat(0, 2).map(lambda values: values[0] if values else None)

    def discard(self) -> "Parser[Any]":
        return self.map(lambda value: DISCARDED)

    def map(self, transform: Callable[[T], U]) -> "Parser[U]":
        def run(text: str, position: int):
            result = self.function(text, position)
            if result is None:
                return None
            return transform(result[0]), result[1]

        return Parser(run)

    def bind(self, continuation: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Feeds the value of `self` to `continuation` and runs the parser it returns."""

        def run(text: str, position: int):
            result = self.function(text, position)
            if result is None:
                return None
            return continuation(result[0]).function(text, result[1])

        return Parser(run)


def char_in(characters: CharacterSet) -> Parser[str]:
    def run(text: str, position: int):
        if position < len(text) and text[position] in characters:
            return text[position], position + 1
        return None

    return Parser(run)


def literal(expected: str) -> Parser[str]:
    def run(text: str, position: int):
        if text.startswith(expected, position):
            return expected, position + len(expected)
        return None

    return Parser(run)


def succeed(value: T) -> Parser[T]:
    return Parser(lambda text, position: (value, position))


eof: Parser[Any] = Parser(lambda text, position: (DISCARDED, position) if position == len(text) else None)


def lazy(factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defers building a parser until it is first run, so rules can refer to rules defined later."""
    build = cache(factory)
    return Parser(lambda text, position: build().function(text, position))


def fix(definition: Callable[[Callable[[int], Parser[T]]], Callable[[int], Parser[T]]]) -> Callable[[int], Parser[T]]:
    """Ties the knot for a rule parameterized by an integer.

    `definition` receives the finished rule and returns its body, so the body
    may call the rule recursively. `definition` runs once and the rule is
    built once per argument.
    """

    @lru_cache(maxsize=None)
    def rule(argument: int) -> Parser[T]:
        return body(argument)

    body = definition(rule)
    return rule


def interleave(separator: Parser[Any], parser: Parser[T]) -> Parser[list[T]]:
    """One or more `parser` matches separated by `separator`, whose values are dropped."""
    following = separator.discard().sequence(parser).repeat()
    return parser.sequence(following).map(lambda pair: [pair[0], *pair[1]])


__all__ = [
    "DISCARDED",
    "ParseResult",
    "Parser",
    "char_in",
    "literal",
    "succeed",
    "eof",
    "lazy",
    "fix",
    "interleave",
]
