"""Binary trees and the lowest common ancestor of their deepest leaves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def lca_deepest_leaves(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the smallest subtree root that holds every deepest leaf."""

    def deepest(node: Optional[TreeNode]) -> tuple[Optional[TreeNode], int]:
        if node is None:
            return None, 0
        left_node, left_depth = deepest(node.left)
        right_node, right_depth = deepest(node.right)
        if left_depth == right_depth:
            return node, left_depth + 1
        if left_depth > right_depth:
            return left_node, left_depth + 1
        return right_node, right_depth + 1

    return deepest(root)[0]