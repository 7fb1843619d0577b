"""Binary trees and the traversal-based algorithms on them."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __iter__(self) -> Iterator["TreeNode"]:
        """Yield the nodes of the subtree in pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order ``values`` where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def _leaves(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield leaf values from left to right."""
    if root is None:
        return
    for node in root:
        if node.is_leaf:
            yield node.val


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Values visible from the right side, top to bottom."""
    view: list[int] = []
    stack: list[tuple[TreeNode, int]] = [] if root is None else [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if depth == len(view):
            view.append(node.val)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return view


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack: list[tuple[TreeNode, int]] = [] if root is None else [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def amount_of_time(root: Optional[TreeNode], start: int) -> int:
    """Minutes for an infection starting at value ``start`` to reach every node."""
    graph: defaultdict[int, list[int]] = defaultdict(list)
    if root is not None:
        for node in root:
            graph[node.val]
            for child in (node.left, node.right):
                if child is not None:
                    graph[node.val].append(child.val)
                    graph[child.val].append(node.val)
    if start not in graph:
        raise ValueError(f"value {start} is not in the tree")

    seen = {start}
    frontier = [start]
    minutes = -1
    while frontier:
        minutes += 1
        following: list[int] = []
        for value in frontier:
            for neighbour in graph[value]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return minutes


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Whether both trees have the same left-to-right leaf sequence."""
    return list(_leaves(root1)) == list(_leaves(root2))


def max_ancestor_diff(root: Optional[TreeNode]) -> int:
    """Largest absolute difference between a node and any of its ancestors."""
    if root is None:
        return 0
    best = 0
    stack: list[tuple[TreeNode, int, int]] = [(root, root.val, root.val)]
    while stack:
        node, low, high = stack.pop()
        low = min(low, node.val)
        high = max(high, node.val)
        best = max(best, high - low)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, low, high))
    return best


def pseudo_palindromic_paths(root: Optional[TreeNode]) -> int:
    """Count root-to-leaf paths whose values can be permuted into a palindrome."""
    count = 0
    stack: list[tuple[TreeNode, int]] = [] if root is None else [(root, 0)]
    while stack:
        node, parity = stack.pop()
        parity ^= 1 << node.val
        if node.is_leaf:
            if parity & (parity - 1) == 0:
                count += 1
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, parity))
    return count


def range_sum_bst(root: Optional[TreeNode], low: int, high: int) -> int:
    """Sum of node values lying in the inclusive range ``[low, high]``."""
    if root is None:
        return 0
    return sum(node.val for node in root if low <= node.val <= high)


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree rooted at the node holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if node.val > val else node.right
    return node


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum of the numbers spelled by the digits on each root-to-leaf path."""
    total = 0
    stack: list[tuple[TreeNode, int]] = [] if root is None else [(root, 0)]
    while stack:
        node, number = stack.pop()
        number = number * 10 + node.val
        if node.is_leaf:
            total += number
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, number))
    return total