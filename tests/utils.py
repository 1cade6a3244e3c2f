"""
Utility functions shared across OGDL tests.
"""
from ogdl.nodes import Node


def node(value: str, *children: Node) -> Node:
    """
    Build a node with the given children.
    """
    return Node(value=value, children=children)
