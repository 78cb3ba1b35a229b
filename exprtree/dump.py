"""Writing an expression tree as a Graphviz description."""

from __future__ import annotations

import os
from typing import Union

from .expression import Action
from .tree import Node, NodeType, Tree


def _address(obj: object) -> str:
    return "(nil)" if obj is None else f"0x{id(obj):x}"


def format_node_data(node: Node) -> str:
    """Return the text shown for a node's value."""
    if node.type == NodeType.LEAF:
        return str(node.data)
    if node.type == NodeType.VARIABLES:
        return str(node.data)
    for action in Action:
        if node.data == action:
            return action.name.lower()
    return ""


def _record(node: Node, parent_address: str) -> str:
    return (
        f'a{_address(node)} [label="{{Type {int(node.type)} | Parent {parent_address}'
        f" | Ptr {_address(node)} | Data {format_node_data(node)}"
        f' | {{Left {_address(node.left)} | Right {_address(node.right)} }}}}"];\n'
    )


def _render_node(node: Node) -> str:
    parent = node.parent
    side = "Left" if parent is not None and parent.left is node else "Right"
    return (
        "subgraph cluster_A_left {\nlabel=\"Левое облачко A1\";\n"
        "style=dotted;\nnode [shape=record];\n"
        + _record(node, _address(parent))
        + f'a{_address(parent)} -> a{_address(node)} [label="{side}" dir=forward];\n}}\n'
    )


def render_dot(tree: Tree) -> str:
    """Return the Graphviz text describing every node of ``tree``."""
    root = tree.root
    parts = [
        "digraph G\n {rankdir=TB;\n"
        f' root [label="Header tree {_address(tree)}" shape=box];\n',
        'subgraph cluster_A {label="Облачко A";style=dashed;node [shape=record];\n',
        _record(root, _address(tree)).rstrip("\n") + f"\n root -> a{_address(root)};",
    ]
    nodes = tree.preorder()
    next(nodes)
    parts.extend(_render_node(node) for node in nodes)
    parts.append("\n}\n}")
    return "".join(parts)


def dump(tree: Tree, path: Union[str, os.PathLike]) -> None:
    """Write the Graphviz description of ``tree`` to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(render_dot(tree))