"""Height-balanced AVL trees with traversals, queries and a report command."""

__version__ = "0.1.0"
__all__ = ["cli", "tree"]