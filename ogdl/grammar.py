"""Structural OGDL grammar: inline chains, groups, sibling lists and indented lines."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from .combinators import Parser, fix, interleave, lazy, literal, succeed
from .lexical import br, comment, indentation, optional_space, required_space, separator, value
from .nodes import Node

LineRule = Callable[[int], Parser[list[Node]]]


def _fold_chain(nodes: list[Node]) -> Node:
    chain = nodes[-1]
    for parent in reversed(nodes[:-1]):
        chain = parent.with_children([chain])
    return chain


def _concat_lines(pair: tuple[list[Node] | None, list[list[Node]]]) -> list[Node]:
    first, following = pair
    nodes = list(first or [])
    for line_nodes in following:
        nodes.extend(line_nodes)
    return nodes


children: Parser[list[Node]] = lazy(lambda: group.or_else(element.map(lambda elem: [elem])))

element: Parser[Node] = lazy(
    lambda: value.sequence(optional_space.sequence(children).optional()).map(
        lambda pair: Node(value=pair[0], children=pair[1] or ())
    )
)

descendent: Parser[Node] = value.map(lambda token: Node(value=token))

# Parses a sequence of hierarchically descending elements, e.g.:
#
#   x y z # => Node(x, [Node(y, [Node(z)])])
descendents: Parser[Node] = interleave(required_space, descendent).map(_fold_chain)

# A chain of descendents, optionally ending in a group:
#
#   x y (u, v) # => Node(x, [Node(y, [Node(u), Node(v)])])
descendent_chain: Parser[Node] = descendents.sequence(optional_space.sequence(lazy(lambda: group)).or_else(succeed([]))).map(
    lambda pair: pair[0].with_children_at_tail(pair[1])
)

# Adjacent siblings:
#
#   x, y z, w (u, v) # => [Node(x), Node(y, [Node(z)]), Node(w, [Node(u), Node(v)])]
adjacent: Parser[list[Node]] = interleave(separator, descendent_chain)

# A parenthesized sibling list:
#
#   (x, y z, w) # => [Node(x), Node(y, [Node(z)]), Node(w)]
group: Parser[list[Node]] = (
    literal("(").discard().sequence(optional_space).sequence(adjacent).sequence(optional_space).sequence(literal(")").discard())
)


def _following_line(line: LineRule, n: int) -> Parser[list[Node]]:
    return comment.or_else(br).repeat(1).discard().sequence(line(n))


def _lines(line: LineRule, n: int) -> Parser[list[Node]]:
    return line(n).optional().sequence(_following_line(line, n).repeat()).map(_concat_lines)


def _subgraph(line: LineRule, n: int) -> Parser[list[Node]]:
    nested = descendents.sequence(lazy(lambda: _lines(line, n + 1))).map(
        lambda pair: [pair[0].with_children_at_tail(pair[1])]
    )
    # `lines` never fails, so this falls back to `adjacent` only when no descendents match
    return nested.or_else(adjacent)


def _line(line: LineRule) -> LineRule:
    @lru_cache(maxsize=None)
    def content(width: int) -> Parser[list[Node]]:
        return _subgraph(line, width).sequence(optional_space)

    def at_indentation(n: int) -> Parser[list[Node]]:
        # the detected width becomes the minimum for this line's nested lines
        return indentation(n).bind(content)

    return at_indentation


line: LineRule = fix(_line)


@lru_cache(maxsize=None)
def following_line(n: int) -> Parser[list[Node]]:
    """Blank and comment-only lines followed by a line indented at least `n`."""
    return _following_line(line, n)


@lru_cache(maxsize=None)
def lines(n: int) -> Parser[list[Node]]:
    return _lines(line, n)


@lru_cache(maxsize=None)
def subgraph(n: int) -> Parser[list[Node]]:
    return _subgraph(line, n)


_trivia = comment.or_else(br).repeat().discard()

graph: Parser[list[Node]] = _trivia.sequence(lines(0).or_else(adjacent)).sequence(_trivia)


def parse(text: str) -> list[Node] | None:
    """Parses a textual OGDL graph into its root nodes, or None if the text is not a graph.

    Example:

        parse("foo\\n  bar\\n  baz") # => [Node(foo, [Node(bar), Node(baz)])]
    """
    result = graph(text)
    if result is None or result[1] != len(text):
        return None
    return result[0]


__all__ = [
    "element",
    "descendent",
    "descendents",
    "descendent_chain",
    "adjacent",
    "group",
    "line",
    "following_line",
    "lines",
    "subgraph",
    "graph",
    "parse",
]
