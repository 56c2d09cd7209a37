"""A plain binary tree of values with traversals, search, insertion and sizing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and optional left and right children."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, data: Any) -> Node:
        """Attach a new leaf as the left child, replacing any existing one."""
        self.left = Node(data)
        return self.left

    def insert_right(self, data: Any) -> Node:
        """Attach a new leaf as the right child, replacing any existing one."""
        self.right = Node(data)
        return self.right

    def delete_left(self) -> Optional[Node]:
        """Detach the left subtree and return it."""
        removed, self.left = self.left, None
        return removed

    def delete_right(self) -> Optional[Node]:
        """Detach the right subtree and return it."""
        removed, self.right = self.right, None
        return removed


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def inorder_recursive(root: Optional[Node]) -> list:
    """Values in left-root-right order, by recursion."""
    if root is None:
        return []
    return [*inorder_recursive(root.left), root.data, *inorder_recursive(root.right)]


def inorder_iterative(root: Optional[Node]) -> list:
    """Values in left-root-right order, using an explicit stack."""
    result = []
    stack: list[Node] = []
    current = root
    while True:
        while current is not None:
            stack.append(current)
            current = current.left
        if not stack:
            return result
        current = stack.pop()
        result.append(current.data)
        current = current.right


def postorder_recursive(root: Optional[Node]) -> list:
    """Values in left-right-root order, by recursion."""
    if root is None:
        return []
    return [
        *postorder_recursive(root.left),
        *postorder_recursive(root.right),
        root.data,
    ]


def postorder_iterative(root: Optional[Node]) -> list:
    """Values in left-right-root order, using an explicit stack."""
    result = []
    stack: list[Node] = []
    previous: Optional[Node] = None
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        while current is None and stack:
            candidate = stack[-1]
            if candidate.right is None or candidate.right is previous:
                result.append(candidate.data)
                stack.pop()
                previous = candidate
            else:
                current = candidate.right
    return result


def levelorder(root: Optional[Node]) -> list:
    """Values level by level, left to right."""
    return [node.data for node in _breadth_first(root)]


def _breadth_first(root: Optional[Node]) -> Iterator[Node]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(_children(node))


def find_max_recursive(root: Optional[Node]) -> Any:
    """Largest value in the tree, by recursion; an empty tree raises ValueError."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    return max([root.data, *(find_max_recursive(child) for child in _children(root))])


def find_max_iterative(root: Optional[Node]) -> Any:
    """Largest value in the tree, by a level-order walk; an empty tree raises ValueError."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    return max(node.data for node in _breadth_first(root))


def contains_recursive(root: Optional[Node], data: Any) -> bool:
    """Whether the value occurs anywhere in the tree, by recursion."""
    if root is None:
        return False
    return (
        root.data == data
        or contains_recursive(root.left, data)
        or contains_recursive(root.right, data)
    )


def contains_iterative(root: Optional[Node], data: Any) -> bool:
    """Whether the value occurs anywhere in the tree, by a level-order walk."""
    return any(node.data == data for node in _breadth_first(root))


def insert_level_order(root: Optional[Node], data: Any) -> Node:
    """Put a new leaf in the first free child slot in level order and return it."""
    if root is None:
        raise ValueError("cannot insert into an empty tree")
    for node in _breadth_first(root):
        if node.left is None:
            return node.insert_left(data)
        if node.right is None:
            return node.insert_right(data)
    raise AssertionError("a finite tree always has a free slot")


def size_recursive(root: Optional[Node]) -> int:
    """Number of nodes, by recursion."""
    if root is None:
        return 0
    return size_recursive(root.left) + 1 + size_recursive(root.right)


def size_iterative(root: Optional[Node]) -> int:
    """Number of nodes, by a level-order walk."""
    return sum(1 for _ in _breadth_first(root))