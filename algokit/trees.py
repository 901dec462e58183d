"""Binary trees and algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import zip_longest

_MISSING = object()


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    @classmethod
    def from_level_order(cls, values: Iterable[int | None]) -> TreeNode | None:
        """Build a tree from level-order values, where ``None`` marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending = deque([root])
        while pending:
            node = pending.popleft()
            for side in ("left", "right"):
                value = next(items, _MISSING)
                if value is _MISSING:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(node, side, child)
                    pending.append(child)
        return root

    def __iter__(self) -> Iterator[int]:
        """Yield the values of the tree in order."""
        stack: list[TreeNode] = []
        node: TreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from a sorted sequence."""

    def build(left: int, right: int) -> TreeNode | None:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def _leaves(root: TreeNode | None) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_similar(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Tell whether two trees have the same leaf values from left to right."""
    return all(
        a == b for a, b in zip_longest(_leaves(root1), _leaves(root2), fillvalue=_MISSING)
    )


def max_depth(root: TreeNode | None) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    level = [root]
    depth = 0
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth