"""A height-balanced (AVL) binary search tree with query and display helpers."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """A tree node; ``balance`` is height(right) minus height(left)."""

    key: Any
    left: Node | None = None
    right: Node | None = None
    balance: int = 0


def _fix_left_heavy(p: Node) -> Node:
    """Rebalance a subtree whose left side is two levels taller; return its new root."""
    logger.debug("rebalancing left-heavy node %r", p.key)
    u = p.left
    if u.balance == -1:
        p.left, u.right = u.right, p
        p.balance = u.balance = 0
        return u
    if u.balance == 1:
        v = u.right
        u.right, v.left = v.left, u
        p.left, v.right = v.right, p
        p.balance = 1 if v.balance == -1 else 0
        u.balance = -1 if v.balance == 1 else 0
        v.balance = 0
        return v
    # Only reachable on removal: the left child is itself balanced.
    p.left, u.right = u.right, p
    u.balance = 1
    return u


def _fix_right_heavy(p: Node) -> Node:
    """Rebalance a subtree whose right side is two levels taller; return its new root."""
    logger.debug("rebalancing right-heavy node %r", p.key)
    u = p.right
    if u.balance == 1:
        p.right, u.left = u.left, p
        p.balance = u.balance = 0
        return u
    if u.balance == -1:
        v = u.left
        u.left, v.right = v.right, u
        p.right, v.left = v.left, p
        p.balance = -1 if v.balance == 1 else 0
        u.balance = 1 if v.balance == -1 else 0
        v.balance = 0
        return v
    p.right, u.left = u.left, p
    u.balance = -1
    return u


def _insert(node: Node | None, key: Any) -> tuple[Node, bool]:
    """Insert a key known to be absent; return the subtree root and whether it grew."""
    if node is None:
        return Node(key), True
    if key < node.key:
        node.left, grew = _insert(node.left, key)
        if not grew:
            return node, False
        if node.balance == 1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        return _fix_left_heavy(node), False
    node.right, grew = _insert(node.right, key)
    if not grew:
        return node, False
    if node.balance == -1:
        node.balance = 0
        return node, False
    if node.balance == 0:
        node.balance = 1
        return node, True
    return _fix_right_heavy(node), False


def _remove(node: Node | None, key: Any) -> tuple[Node | None, bool]:
    """Remove a key; return the subtree root and whether the subtree got shorter."""
    if node is None:
        return None, False
    if key == node.key:
        if node.left is None or node.right is None:
            return (node.left if node.left is not None else node.right), True
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        node.key = key = predecessor.key
    if key > node.key:
        node.right, shrunk = _remove(node.right, key)
        if not shrunk:
            return node, False
        if node.balance == 1:
            node.balance = 0
            return node, True
        if node.balance == 0:
            node.balance = -1
            return node, False
        root = _fix_left_heavy(node)
        return root, root.balance == 0
    node.left, shrunk = _remove(node.left, key)
    if not shrunk:
        return node, False
    if node.balance == -1:
        node.balance = 0
        return node, True
    if node.balance == 0:
        node.balance = 1
        return node, False
    root = _fix_right_heavy(node)
    return root, root.balance == 0


class AVLTree:
    """An AVL tree holding unique keys; duplicates are ignored."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        if key in self:
            return False
        self.root, _ = _insert(self.root, key)
        self._size += 1
        return True

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self.root, _ = _remove(self.root, key)
        self._size -= 1
        return True

    def find(self, key: Any) -> Node | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def find_with_parent(self, key: Any) -> tuple[Node | None, Node | None]:
        """Return ``(node, parent)``; when absent, node is None and parent is the last node visited."""
        parent = None
        node = self.root
        while node is not None:
            if key == node.key:
                return node, parent
            parent = node
            node = node.left if key < node.key else node.right
        return None, parent

    def clear(self) -> None:
        """Remove every key."""
        self.root = None
        self._size = 0

    def height(self) -> int:
        """Height of the tree; -1 when empty, 0 for a single node."""

        def measure(node: Node | None) -> int:
            if node is None:
                return -1
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def in_order(self) -> Iterator[Any]:
        """Yield keys in ascending order."""

        def walk(node: Node | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield node.key
                yield from walk(node.right)

        return walk(self.root)

    def pre_order(self) -> Iterator[Any]:
        """Yield keys node first, then left and right subtrees."""

        def walk(node: Node | None) -> Iterator[Any]:
            if node is not None:
                yield node.key
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self.root)

    def post_order(self) -> Iterator[Any]:
        """Yield keys of both subtrees before the node itself."""

        def walk(node: Node | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.key

        return walk(self.root)

    def _levels(self) -> Iterator[tuple[Node, int]]:
        if self.root is None:
            return
        queue: deque[tuple[Node, int]] = deque([(self.root, 0)])
        while queue:
            node, level = queue.popleft()
            yield node, level
            for child in (node.left, node.right):
                if child is not None:
                    queue.append((child, level + 1))

    def level_order(self) -> Iterator[Any]:
        """Yield keys breadth first, left to right."""
        return (node.key for node, _ in self._levels())

    def nested(self) -> str:
        """Pre-order text with balance factors, children in parentheses: ``k[b](...)``."""

        def show(node: Node | None) -> str:
            if node is None:
                return ""
            return f"{node.key}[{node.balance}]({show(node.left)}{show(node.right)})"

        return show(self.root)

    def render(self) -> str:
        """Indented drawing of the tree, one key per line."""
        parts: list[str] = []

        def draw(node: Node, level: int, is_right: bool) -> None:
            parts.append(f"{node.key}\n")
            prefix = ("   " if is_right else "|  ") * level
            if node.left is not None:
                parts.append(prefix + "├──")
                draw(node.left, level + 1, False)
            if node.right is not None:
                parts.append(prefix + "└──")
                draw(node.right, level + 1, True)

        if self.root is not None:
            draw(self.root, 0, False)
        return "".join(parts)

    def is_balanced(self) -> bool:
        """True if every node's stored balance is correct and within [-1, 1]."""

        def check(node: Node | None) -> int | None:
            if node is None:
                return -1
            left = check(node.left)
            if left is None:
                return None
            right = check(node.right)
            if right is None:
                return None
            diff = right - left
            if diff != node.balance or not -1 <= diff <= 1:
                return None
            return 1 + max(left, right)

        return check(self.root) is not None

    def level_of(self, key: Any) -> int | None:
        """Depth of ``key`` (root is 0), or None if absent."""
        depth = 0
        node = self.root
        while node is not None:
            if key == node.key:
                return depth
            node = node.left if key < node.key else node.right
            depth += 1
        return None

    def in_range(self, low: Any, high: Any) -> list[Any]:
        """Keys ``k`` with ``low <= k <= high``, ascending."""
        found: list[Any] = []

        def walk(node: Node | None) -> None:
            if node is None:
                return
            if low < node.key:
                walk(node.left)
            if low <= node.key <= high:
                found.append(node.key)
            if node.key < high:
                walk(node.right)

        walk(self.root)
        return found

    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return sum(
            1 for node, _ in self._levels() if node.left is None and node.right is None
        )

    def minimum(self) -> Any:
        """Smallest key; raises ValueError when empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """Largest key; raises ValueError when empty."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.key

    def kth_smallest(self, k: int) -> Any:
        """The k-th smallest key, counting from 1; raises IndexError when out of range."""
        if not 1 <= k <= self._size:
            raise IndexError(f"k must be between 1 and {self._size}, got {k}")
        for position, key in enumerate(self.in_order(), start=1):
            if position == k:
                return key
        raise IndexError(k)

    def same_level(self, x: Any, y: Any) -> bool:
        """True if both keys are present at the same depth."""
        level_x = self.level_of(x)
        return level_x is not None and level_x == self.level_of(y)

    def total(self) -> Any:
        """Sum of all keys."""
        return sum(self.in_order())