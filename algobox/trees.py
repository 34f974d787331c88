"""Binary trees and binary-search-tree queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice, pairwise
from typing import Iterator, List, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _walk_inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def inorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in left, node, right order."""
    return list(_walk_inorder(root))


def preorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values in node, left, right order."""
    result: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def level_order_bottom(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values level by level, from the deepest level up to the root."""
    levels: List[List[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    levels.reverse()
    return levels


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for value in islice(_walk_inorder(root), k - 1, None):
        return value
    raise ValueError(f"tree holds fewer than {k} values")


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree's in-order values are strictly increasing."""
    return all(a < b for a, b in pairwise(_walk_inorder(root)))