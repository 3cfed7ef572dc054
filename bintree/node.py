"""Binary tree nodes and the operations defined on them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        node = Node(value, self)
        old = self.left
        self.left = node
        if old is not None:
            node.left = old
            old.parent = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        node = Node(value, self)
        old = self.right
        self.right = node
        if old is not None:
            node.right = old
            old.parent = node
        return node

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = node.right = node.parent = None

    def is_leaf(self) -> bool:
        """Return whether this node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return whether this node has no parent."""
        return self.parent is None

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node._children())))

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        best = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            best = max(best, level)
            stack.extend((child, level + 1) for child in node._children())
        return best

    def depth(self) -> int:
        """Return the number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Return the number of nodes in the subtree."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Return the number of leaves in the subtree."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Return the number of nodes with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Return the left subtree height minus the right subtree height."""

        def levels(child: Optional[Node]) -> int:
            return 0 if child is None else child.height() + 1

        return levels(self.left) - levels(self.right)

    def is_full(self) -> bool:
        """Return whether every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """Return whether the tree is full and all leaves share one depth."""
        leaf_level: Optional[int] = None
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                if leaf_level is None:
                    leaf_level = level
                elif leaf_level != level:
                    return False
            elif node.left is None or node.right is None:
                return False
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return True

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        return None if self.parent is None else self.parent.sibling()