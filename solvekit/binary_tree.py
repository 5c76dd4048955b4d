"""Binary trees of integer-valued nodes and operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def delete_nodes(root: Optional[TreeNode], to_delete: Iterable[int]) -> list[TreeNode]:
    """Delete nodes with the given values, returning the roots of the remaining forest.

    The tree is pruned in place. Roots freed by a deletion are listed in
    post-order; the original root, if kept, comes last.
    """
    doomed = set(to_delete)
    forest: list[TreeNode] = []

    def prune(node: TreeNode) -> bool:
        if node.left is not None and prune(node.left):
            node.left = None
        if node.right is not None and prune(node.right):
            node.right = None
        if node.val in doomed:
            forest.extend(child for child in (node.left, node.right) if child is not None)
            return True
        return False

    if root is not None and not prune(root):
        forest.append(root)
    return forest


def get_directions(root: TreeNode, start_value: int, dest_value: int) -> str:
    """Shortest path from one node to another as a string of 'U', 'L' and 'R'."""
    parent: dict[int, tuple[int, str]] = {}
    depth = {root.val: 0}
    stack = [root]
    while stack:
        node = stack.pop()
        for child, step in ((node.left, "L"), (node.right, "R")):
            if child is not None:
                parent[child.val] = (node.val, step)
                depth[child.val] = depth[node.val] + 1
                stack.append(child)

    missing = {start_value, dest_value} - depth.keys()
    if missing:
        raise ValueError(f"values not in tree: {sorted(missing)}")

    ups = 0
    downs: list[str] = []
    start, dest = start_value, dest_value
    while start != dest:
        if depth[start] > depth[dest]:
            start = parent[start][0]
            ups += 1
        else:
            dest, step = parent[dest]
            downs.append(step)
    return "U" * ups + "".join(reversed(downs))


def create_binary_tree(descriptions: Iterable[Sequence[int]]) -> TreeNode:
    """Build a tree from ``[parent, child, is_left]`` triples.

    When several nodes have no parent, the smallest value becomes the root.
    """
    children: dict[int, list[Optional[int]]] = {}
    present: set[int] = set()
    has_parent: set[int] = set()
    for parent, child, is_left in descriptions:
        present.update((parent, child))
        has_parent.add(child)
        slots = children.setdefault(parent, [None, None])
        slots[0 if is_left == 1 else 1] = child

    candidates = present - has_parent
    if not candidates:
        raise ValueError("descriptions do not define a root")

    root = TreeNode(min(candidates))
    stack = [root]
    while stack:
        node = stack.pop()
        left, right = children.get(node.val, (None, None))
        if left is not None:
            node.left = TreeNode(left)
            stack.append(node.left)
        if right is not None:
            node.right = TreeNode(right)
            stack.append(node.right)
    return root