"""Command line entry point: build, draw and evaluate an expression."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from .dump import dump
from .expression import ExpressionError, decide, insert_from_text
from .reader import DEFAULT_PATH, ReaderError, read_commands
from .tree import Tree


def _read_value(name: str) -> int:
    while True:
        print("enter value:")
        try:
            line = input()
        except EOFError as exc:
            raise ExpressionError(f"no value given for variable {name!r}") from exc
        try:
            return int(line.strip())
        except ValueError:
            print("Input error. Try again")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="Build an expression tree, draw it and evaluate it.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_PATH, help="expression file")
    parser.add_argument(
        "--output-dir", default="data", help="directory for the Graphviz files"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the exit status."""
    args = _parser().parse_args(argv)
    out_dir = args.output_dir
    tree = Tree()
    try:
        os.makedirs(out_dir, exist_ok=True)
        dump(tree, os.path.join(out_dir, "bata.dot"))
        insert_from_text(read_commands(args.input), tree)
        dump(tree, os.path.join(out_dir, "bata2.dot"))
        result = decide(tree, _read_value)
        if result is not None:
            print(f"result = {result}")
        dump(tree, os.path.join(out_dir, "bata3.dot"))
    except (ReaderError, ExpressionError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        tree.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())