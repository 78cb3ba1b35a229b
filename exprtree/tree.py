"""Binary expression tree: nodes, node kinds and the tree container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, Union

NodeData = Union[int, str]


class NodeType(IntEnum):
    """Kind of a tree node."""

    KNOT = 0
    LEAF = 1
    VARIABLES = 2


@dataclass(eq=False)
class Node:
    """A node holding an operation code, a number or a variable name."""

    type: NodeType = NodeType.KNOT
    data: NodeData = 0
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None

    def remove(self) -> None:
        """Detach the node from its parent, which then becomes a leaf."""
        parent = self.parent
        if parent is None:
            raise ValueError("cannot remove a node without a parent")
        parent.type = NodeType.LEAF
        if parent.left is self:
            parent.left = None
        elif parent.right is self:
            parent.right = None
        self.left = None
        self.right = None
        self.parent = None


@dataclass
class Tree:
    """A tree whose root starts out as an empty operation node."""

    root: Node = field(default_factory=Node)
    size: int = 0

    def new_node(self, value: NodeData, parent: Node, node_type: NodeType) -> Node:
        """Create a child of ``parent`` and count it.

        The parent becomes an operation node; attaching the child to the
        parent's left or right slot is left to the caller.
        """
        node = Node(type=NodeType(node_type), data=value, parent=parent)
        parent.type = NodeType.KNOT
        self.size += 1
        return node

    def preorder(self) -> Iterator[Node]:
        """Yield every node, root first, each left subtree before the right."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def clear(self) -> None:
        """Drop every node and return the tree to its freshly built state."""
        for node in list(self.preorder()):
            node.left = None
            node.right = None
            node.parent = None
        self.root = Node()
        self.size = 0