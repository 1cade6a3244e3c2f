"""Node definitions for parsed OGDL graphs."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict


class Node(BaseModel):
    """A labeled tree element. Nodes are frozen; the builder methods return new nodes."""

    model_config = ConfigDict(frozen=True)

    value: str
    children: tuple["Node", ...] = ()

    def with_children(self, children: Iterable["Node"]) -> "Node":
        return Node(value=self.value, children=(*self.children, *children))

    def with_children_at_tail(self, children: Iterable["Node"]) -> "Node":
        """Appends `children` to the last node reached by following each last child, e.g.:

        x y + [u, v] # => Node(x, [Node(y, [Node(u), Node(v)])])
        """
        if not self.children:
            return self.with_children(children)
        *head, last = self.children
        return Node(value=self.value, children=(*head, last.with_children_at_tail(children)))

    def find(self, value: str) -> list["Node"]:
        results = [self] if self.value == value else []
        for child in self.children:
            results.extend(child.find(value))
        return results


__all__ = ["Node"]
