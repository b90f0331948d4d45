"""Command that builds a tree and prints a report of its properties."""

from __future__ import annotations

import argparse

from .tree import AVLTree

DEMO_KEYS = (20, 9, 50, 7, 12, 25, 65)
DEMO_RANGE = (10, 50)
DEMO_PAIRS = ((9, 25), (7, 65), (20, 20))
DEMO_LEVEL_KEYS = (9, 65)
EMPTY_REPORT = "The tree is empty."


def build_demo_tree() -> AVLTree:
    """The sample tree used when no keys are given."""
    return AVLTree(DEMO_KEYS)


def demo_report(tree: AVLTree) -> str:
    """A multi-line report of the tree's statistics, traversals and drawing."""
    if not len(tree):
        return EMPTY_REPORT
    count = min(3, len(tree))
    low, high = DEMO_RANGE
    lines = [
        f"Sum of all values: {tree.total()}",
        f"Number of leaves: {tree.leaf_count()}",
        f"Number of nodes: {len(tree)}",
        f"k-th smallest (1 to {count}):",
        *(f"- {k}: {tree.kth_smallest(k)}" for k in range(1, count + 1)),
        f"Keys in [{low}, {high}]: " + " ".join(map(str, tree.in_range(low, high))),
        f"Minimum: {tree.minimum()}",
        f"Maximum: {tree.maximum()}",
        *(
            f"Same level ({x} and {y}): {'yes' if tree.same_level(x, y) else 'no'}"
            for x, y in DEMO_PAIRS
        ),
        "Level order:",
        " ".join(map(str, tree.level_order())),
        tree.render().rstrip("\n"),
    ]
    for key in DEMO_LEVEL_KEYS:
        level = tree.level_of(key)
        lines.append(f"Level of {key}: {'not found' if level is None else level}")
    lines.append(
        "The tree is balanced." if tree.is_balanced() else "The tree is not balanced."
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the report for the given keys, or for the sample tree."""
    parser = argparse.ArgumentParser(
        prog="avlkit", description="Build an AVL tree and report on it."
    )
    parser.add_argument("keys", nargs="*", type=int, help="integer keys to insert")
    args = parser.parse_args(argv)
    tree = AVLTree(args.keys) if args.keys else build_demo_tree()
    print(demo_report(tree))
    return 0