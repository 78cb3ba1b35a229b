"""Building an arithmetic expression tree from text and evaluating it."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Callable, Iterator, Optional, Tuple

from .tree import Node, NodeData, NodeType, Tree

ValueReader = Callable[[str], int]

_DELIMITERS = frozenset("();\r\0")
_END = "\0"
_LEADING_DIGITS = re.compile(r"\d+")


class Action(IntEnum):
    """Operation codes stored in operation nodes."""

    ADD = 1
    SUB = 2
    MUL = 3
    DIV = 4


class ExpressionError(Exception):
    """Raised for malformed expressions and failed evaluations."""


_ACTION_NAMES = {action.name.lower(): action for action in Action}


def check_data(token: str) -> Optional[Action]:
    """Return the operation named by ``token``, or None if it names none."""
    return _ACTION_NAMES.get(token)


def transfer_argument(token: str) -> Tuple[NodeData, NodeType]:
    """Turn a token into a node value and the kind of node that holds it.

    Operation names give their code, tokens starting with a digit give the
    number formed by their leading digits, anything else is a variable name.
    """
    action = check_data(token)
    if action is not None:
        return action, NodeType.KNOT
    match = _LEADING_DIGITS.match(token)
    if match is None:
        return token, NodeType.VARIABLES
    return int(match.group()), NodeType.LEAF


def _split(text: str) -> Iterator[Tuple[str, str]]:
    """Yield each token together with the delimiter that ends it."""
    length = len(text)
    start = 0
    while start <= length:
        end = start
        while end < length and text[end] not in _DELIMITERS:
            end += 1
        symbol = text[end] if end < length else _END
        yield text[start:end], symbol
        start = end + 1


def _up(node: Node) -> Node:
    if node.parent is None:
        raise ExpressionError("unbalanced ')' in expression")
    return node.parent


def insert_from_text(text: str, tree: Tree) -> Tree:
    """Fill ``tree`` from an expression such as ``add(mul(2;x);3)``."""
    parent = tree.root
    node: Optional[Node] = None
    previous = _END

    for token, symbol in _split(text):
        if (
            (symbol == "(" and previous in (_END, "("))
            or (previous == "(" and symbol == ";")
            or (previous == ")" and symbol == ";")
        ):
            if token:
                value, kind = transfer_argument(token)
                if node is None:
                    node = tree.root
                    node.data = value
                    tree.size += 1
                else:
                    node = tree.new_node(value, parent, kind)
                    parent.left = node
                if symbol == "(":
                    parent = node
            elif previous == ")" and symbol == ";":
                parent = _up(parent)
        elif previous == ";" and symbol in ("(", ")"):
            if token:
                value, kind = transfer_argument(token)
                node = tree.new_node(value, parent, kind)
                parent.right = node
            if symbol == "(":
                if node is None:
                    raise ExpressionError("operand list opened before any node")
                parent = node
        elif symbol == ")" and previous == ")":
            if parent is not tree.root:
                parent = _up(parent)
        previous = symbol
    return tree


def perform_math_operation(action: int, left: int, right: int) -> int:
    """Apply the operation with code ``action``; unknown codes give 0."""
    if action == Action.ADD:
        return left + right
    if action == Action.SUB:
        return left - right
    if action == Action.MUL:
        return left * right
    if action == Action.DIV:
        if right == 0:
            raise ExpressionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    return 0


def _operand(node: Node, read_value: Optional[ValueReader]) -> int:
    if node.type == NodeType.VARIABLES:
        if read_value is None:
            raise ExpressionError(f"no value given for variable {node.data!r}")
        return int(read_value(str(node.data)))
    return int(node.data)


def perform_operation(node: Optional[Node], read_value: Optional[ValueReader] = None) -> int:
    """Replace an operation node and its two children by the computed value."""
    if node is None:
        raise ExpressionError("node is missing")
    if node.type != NodeType.KNOT:
        raise ExpressionError("node is not an operation")
    if node.left is None or node.right is None:
        raise ExpressionError("operation node needs two operands")

    left = _operand(node.left, read_value)
    right = _operand(node.right, read_value)
    node.data = perform_math_operation(int(node.data), left, right)
    node.left.remove()
    node.right.remove()
    return node.data


def _next_operation(node: Node) -> Optional[Node]:
    """Find the operation to reduce next by walking down from ``node``."""
    left, right = node.left, node.right
    if (
        left is not None
        and right is not None
        and left.type == NodeType.LEAF
        and right.type == NodeType.KNOT
    ):
        node = right
    while not node.is_leaf():
        while node.left is not None:
            node = node.left
        if node.right is not None:
            node = node.right
    return node.parent


def decide(tree: Tree, read_value: Optional[ValueReader] = None) -> Optional[int]:
    """Evaluate the tree in place.

    Variables are looked up through ``read_value``. Returns the value of the
    whole expression, or None when the tree held no operation to perform.
    """
    result: Optional[int] = None
    while tree.size > 1:
        node = _next_operation(tree.root)
        value = perform_operation(node, read_value)
        if node is tree.root:
            result = value
        tree.size -= 2
    return result