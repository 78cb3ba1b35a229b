# exprtree

`exprtree` reads an arithmetic expression written in prefix form and builds a binary
expression tree from it. It then evaluates the tree in place, reducing it to one integer.
It can write the tree as a Graphviz DOT description at any point.

## Input format

An expression is an operator name followed by its two operands. The operands go in
parentheses and are separated by `;`. For example:

```
mul(add(2;3);sub(10;x))
```

- The operators are `add`, `sub`, `mul` and `div`.
- A token that starts with a digit is an integer leaf. Its value is the run of leading digits,
  so `12abc` reads as `12`.
- Any other token is a variable. A leading `-` also makes a variable, so a negative number
  is read as a variable.
- Spaces are part of a token, so write the expression without them.

When the tree is evaluated, `div` divides integers and rounds toward zero. Dividing by zero
raises `ExpressionError`.

## Command line

```
exprtree [INPUT] [--output-dir DIR]
```

- `INPUT` is the expression file. It defaults to `TREE_INITIAL_DATA.txt` in the current
  directory.
- `--output-dir` is where the DOT files go. It defaults to `data` and is created if it is
  missing.

The command writes three DOT snapshots:

- `bata.dot` for the empty tree, written before the input is read
- `bata2.dot` for the parsed tree
- `bata3.dot` for the tree after evaluation

For each variable it meets during evaluation, the command prints `enter value:` and reads an
integer from standard input. If the line is not an integer, it prints `Input error. Try again`
and asks again. It then prints `result = N`.

If the file cannot be read, if the expression is malformed, or if input ends while a value is
awaited, the command prints `error: ...` to standard error and exits with status 1.

## Library use

```python
from exprtree.tree import Tree
from exprtree.expression import insert_from_text, decide
from exprtree.dump import render_dot, dump

tree = Tree()
insert_from_text("add(2;mul(3;4))", tree)
print(render_dot(tree))
print(decide(tree, read_value=lambda name: 0))  # 14
dump(tree, "after.dot")
```

- `exprtree.tree` has `Tree`, `Node` and `NodeType`. A `Tree` holds a `root` node and a
  `size`. `Tree.preorder()` yields the nodes root first, each left subtree before the right
  one. `Tree.new_node()` creates a child node, and `Tree.clear()` resets the tree.
- `exprtree.expression` has the tree builder `insert_from_text(text, tree)` and the
  evaluators `decide(tree, read_value)` and `perform_operation(node, read_value)`. It also has
  the helpers `check_data`, `transfer_argument` and `perform_math_operation`, and the
  `Action` operation codes.
  - `read_value` is called with a variable's name and must return its integer value.
  - `decide` returns `None` if the tree held no operation to perform.
- `exprtree.reader.read_commands(path)` returns the text of an expression file. It reads
  `TREE_INITIAL_DATA.txt` by default. The file must be UTF-8.
- `exprtree.dump` has three functions:
  - `format_node_data(node)` returns the text shown for a node.
  - `render_dot(tree)` returns the DOT text for the whole tree.
  - `dump(tree, path)` writes that text to a file.

## Errors

- A file that cannot be opened, read in full or decoded raises `exprtree.reader.ReaderError`.
- Malformed expressions, missing variable values and division by zero raise
  `exprtree.expression.ExpressionError`.

## What it does not do

- It does not turn DOT files into images. Render them with a Graphviz tool of your own.
- It evaluates expressions to integers only. It does no symbolic manipulation of the tree.

## Tests

```
pip install -e .[test]
pytest
```