"""Solutions to classic programming-contest exercises, with a command-line runner."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "basics",
    "cli",
    "graphs",
    "grids",
    "hashing",
    "heaps",
    "segment_trees",
]