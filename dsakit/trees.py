"""Binary trees, their traversals, and binary search trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

NULL_MARKER = -1
"""Input value that stands for a missing node."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values in preorder, with -1 marking each missing child."""
    it = iter(values)

    def build() -> Optional[TreeNode]:
        value = _take(it)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values level by level, with -1 marking each missing child."""
    it = iter(values)
    value = _take(it)
    if value == NULL_MARKER:
        return None
    root = TreeNode(value)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(it)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = _take(it)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[Any]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in node, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def bst_insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` into the search tree; equal values go left. Return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    curr = root
    while True:
        if value > curr.data:
            if curr.right is None:
                curr.right = node
                return root
            curr = curr.right
        else:
            if curr.left is None:
                curr.left = node
                return root
            curr = curr.left


def bst_from_values(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a search tree from ``values``, stopping at the first -1."""
    root = None
    for value in values:
        if value == NULL_MARKER:
            break
        root = bst_insert(root, value)
    return root


def bst_min(root: Optional[TreeNode]) -> Any:
    """Return the smallest value of a non-empty search tree."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root.data


def bst_max(root: Optional[TreeNode]) -> Any:
    """Return the largest value of a non-empty search tree."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    while root.right is not None:
        root = root.right
    return root.data


def bst_delete(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Remove one node holding ``value`` and return the new root."""
    if root is None:
        return None
    if value == root.data:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = bst_min(root.right)
        root.data = successor
        root.right = bst_delete(root.right, successor)
        return root
    if value < root.data:
        root.left = bst_delete(root.left, value)
    else:
        root.right = bst_delete(root.right, value)
    return root