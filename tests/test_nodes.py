"""Tests for the immutable Node model."""
import pytest
from pydantic import ValidationError

from ogdl.nodes import Node
from tests.utils import node


def test_with_children_returns_new_node():
    """Appending children leaves the original untouched."""
    parent = node("a", node("b"))
    extended = parent.with_children([node("c")])
    assert extended == node("a", node("b"), node("c"))
    assert parent == node("a", node("b"))


def test_with_children_at_tail_follows_last_child():
    """Children go to the end of the last-child path."""
    chain = node("x", node("y"))
    assert chain.with_children_at_tail([node("u"), node("v")]) == node("x", node("y", node("u"), node("v")))
    assert node("x").with_children_at_tail([]) == node("x")


def test_nodes_are_frozen():
    """Fields cannot be reassigned after construction."""
    leaf = node("a")
    with pytest.raises(ValidationError):
        leaf.value = "b"


def test_children_coerced_to_tuple():
    """Lists of children are stored as tuples."""
    assert Node(value="a", children=[Node(value="b")]).children == (Node(value="b"),)


def test_model_dump():
    """Nodes export to plain data."""
    assert node("a", node("b")).model_dump() == {
        "value": "a",
        "children": ({"value": "b", "children": ()},),
    }
