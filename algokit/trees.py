"""Binary trees built from array layouts, and sums over their leaves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def tree_from_level_order(values: Sequence[Any], null: Any = None) -> Optional[TreeNode]:
    """Build a tree from an array layout where node i has children 2i+1 and 2i+2.

    Entries equal to ``null`` mark missing nodes.
    """
    values = list(values)

    def build(index: int) -> Optional[TreeNode]:
        if index >= len(values) or values[index] == null:
            return None
        return TreeNode(values[index], build(2 * index + 1), build(2 * index + 2))

    return build(0)


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Return the sum of every leaf that is the left child of its parent."""

    def visit(node: Optional[TreeNode], is_left: bool) -> int:
        if node is None:
            return 0
        if is_left and node.left is None and node.right is None:
            return node.val
        return visit(node.left, True) + visit(node.right, False)

    return visit(root, False)