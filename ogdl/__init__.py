"""Parsing utilities for OGDL (Ordered Graph Data Language) text."""

from .nodes import Node
from .combinators import Parser
from .grammar import (
    adjacent,
    descendent_chain,
    descendents,
    element,
    graph,
    group,
    line,
    lines,
    parse,
    subgraph,
)
from .parser import OGDLParser, ParseException, ParserConfig

__all__ = [
    "Node",
    "Parser",
    "adjacent",
    "descendent_chain",
    "descendents",
    "element",
    "graph",
    "group",
    "line",
    "lines",
    "parse",
    "subgraph",
    "OGDLParser",
    "ParseException",
    "ParserConfig",
]
