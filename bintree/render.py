"""Text rendering of binary trees as ASCII diagrams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node


class _Canvas:
    """Rows of characters that grow on demand as cells are written."""

    def __init__(self, rows: int) -> None:
        self.rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        result = []
        for line in self.rows:
            text = "".join(line)
            # The first two columns are always kept, even when blank.
            head, tail = text[:2].ljust(2), text[2:]
            result.append(head + tail.rstrip(" "))
        return result


def _draw(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw the subtree at the given offset and depth; return its width."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    box = f"({node.value:03d})"
    width = len(box)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(box):
        canvas.put(depth, offset + left + i, char)
    if depth:
        above = depth - 1
        if is_left:
            start = offset + left + width // 2
            for col in range(start, start + width + right):
                canvas.put(above, col, "-")
        else:
            start = offset - width // 2
            for col in range(start, start + left + width):
                canvas.put(above, col, "-")
        canvas.put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the diagram of a tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the diagram of a tree to a file, standard output by default."""
    (sys.stdout if file is None else file).write(render(tree))