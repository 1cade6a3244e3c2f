from typing import List, Optional, NotRequired, TypedDict
import re
from ogdl.charsets import LINE_BREAKS
from ogdl.grammar import graph
from ogdl.nodes import Node
from ogdl.utils import resolve_config
from ogdl.logger import Logger


class ParseException(Exception):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)


class ParserConfig(TypedDict):
    parse: NotRequired[bool]
    enable_logger: NotRequired[bool]
    raise_on_failure: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    parse: bool
    enable_logger: bool
    raise_on_failure: bool


DEFAULT_CONFIG: ParserConfigRequired = {"parse": True, "enable_logger": True, "raise_on_failure": False}

# \r\n counts as a single break
LINE_BREAK_PATTERN = re.compile("\r\n|[" + LINE_BREAKS + "]")


class OGDLParser:
    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "OGDL Parser", "is_enabled": self.config["enable_logger"]}).logger
        self.logger.info("Parser initialized")
        self.text = text
        self.nodes: Optional[List[Node]] = None
        if self.config["parse"]:
            self.nodes = self.parse()

    def _location(self, position: int) -> tuple[int, int]:
        lines = LINE_BREAK_PATTERN.split(self.text[:position])
        return len(lines), len(lines[-1]) + 1

    def parse(self) -> Optional[List[Node]]:
        self.logger.info(f"Parsing {len(self.text)} characters")
        result = graph(self.text)
        stopped = 0 if result is None else result[1]
        if result is None or stopped != len(self.text):
            line, column = self._location(stopped)
            self.logger.debug(f"Graph stopped at line {line}, column {column} of {len(self.text)} characters")
            if self.config["raise_on_failure"]:
                raise ParseException("Unexpected input", line, column)
            self.logger.info("Parse failed")
            return None
        self.nodes = result[0]
        self.logger.debug(f"Parsed {len(self.nodes)} root node(s)")
        self.logger.info("Parse complete")
        return self.nodes

    def find_by_value(self, value: str) -> List[Node]:
        results = []
        for node in self.nodes or []:
            results.extend(node.find(value))
        return results

    def print_tree(self):
        for node in self.nodes or []:
            self._print_node(node)

    def _print_node(self, node: Node, indent: int = 0):
        print(f"{'  ' * indent}{node.value}")
        for child in node.children:
            self._print_node(child, indent + 1)
