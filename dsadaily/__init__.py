"""Classic data-structure and algorithm solutions grouped by topic."""

__version__ = "0.1.0"
__all__ = ["arrays", "hashing", "windows", "strings", "dp", "trees", "greedy", "graphs"]