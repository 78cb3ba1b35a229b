"""Arithmetic expression trees: parsing prefix text, evaluation and Graphviz DOT output."""

__version__ = "0.1.0"
__all__ = ["tree", "reader", "expression", "dump", "cli"]