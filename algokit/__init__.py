"""Classic algorithm exercises: trees, subsets, permutations, containers and puzzles."""

__version__ = "0.1.0"