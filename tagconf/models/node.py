"""
Tree model for parsed configuration.

A configuration is a tree of three node variants:
- Section: a named tag pair owning an ordered list of children
- Leaf: a key with a raw string value
- Comment: free text, ignored by path queries

Each node is owned by its parent's ``children`` list. ``parent`` is a plain
back-reference used for cursor movement and is never an ownership edge.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class NodeKind(Enum):
    """Kinds of configuration nodes."""

    SECTION = auto()
    LEAF = auto()
    COMMENT = auto()


@dataclass(eq=False)
class Node:
    """Fields shared by every node variant."""

    name: str
    line: int = 0
    parent: Section | None = field(default=None, repr=False)
    depth: int = field(default=0, repr=False)

    kind: ClassVar[NodeKind]

    def _set_depth(self, depth: int) -> None:
        self.depth = depth


@dataclass(eq=False)
class Leaf(Node):
    """
    A key/value assignment.

    The value is always stored as text; typed views are produced at query time.
    """

    value: str = ""

    kind: ClassVar[NodeKind] = NodeKind.LEAF

    def __repr__(self) -> str:
        return f"Leaf({self.name!r}, {self.value!r})"


@dataclass(eq=False)
class Comment(Node):
    """A comment line. The comment text is kept in ``name``."""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    @property
    def text(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Comment({self.name!r})"


@dataclass(eq=False)
class Section(Node):
    """
    A named section with ordered children.

    Examples:
        [mqtt] ... [!mqtt]    -> Section(name="mqtt", children=[...])
        <server> ... </server> -> Section(name="server", children=[...])
    """

    children: list[Node] = field(default_factory=list, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.SECTION

    def __repr__(self) -> str:
        return f"Section({self.name!r}, children={len(self.children)})"

    def _set_depth(self, depth: int) -> None:
        self.depth = depth
        for child in self.children:
            child._set_depth(depth + 1)

    def append(self, node: Node) -> Node:
        """
        Attach a detached node as the last child.

        Args:
            node: Node without a parent

        Returns:
            The attached node

        Raises:
            ValueError: If the node already belongs to a section or is this section
        """
        if node.parent is not None:
            raise ValueError(f"{node!r} is already attached to {node.parent!r}")
        if node is self:
            raise ValueError(f"Cannot attach {node!r} to itself")

        node.parent = self
        node._set_depth(self.depth + 1)
        self.children.append(node)
        return node

    def create(self, kind: NodeKind, name: str, value: str = "", line: int = 0) -> Node:
        """Create a child of the given kind and return a handle to it."""
        if kind is NodeKind.SECTION:
            return self.append(Section(name, line=line))
        if kind is NodeKind.LEAF:
            return self.append(Leaf(name, line=line, value=value))
        return self.append(Comment(name, line=line))

    def create_section(self, name: str, line: int = 0) -> Section:
        return self.append(Section(name, line=line))  # type: ignore[return-value]

    def create_leaf(self, name: str, value: str = "", line: int = 0) -> Leaf:
        return self.append(Leaf(name, line=line, value=value))  # type: ignore[return-value]

    def create_comment(self, text: str, line: int = 0) -> Comment:
        return self.append(Comment(text, line=line))  # type: ignore[return-value]

    def find(self, name: str) -> Iterator[Node]:
        """Yield direct children with the given name, comments excluded."""
        for child in self.children:
            if child.kind is not NodeKind.COMMENT and child.name == name:
                yield child

    def walk(self) -> Iterator[Node]:
        """Yield all descendants in pre-order."""
        for child in self.children:
            yield child
            if isinstance(child, Section):
                yield from child.walk()
