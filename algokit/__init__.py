"""Solutions to classic algorithm and data-structure problems, grouped by technique."""

__version__ = "0.1.0"
__all__ = [
    "anagrams",
    "arrays",
    "dynamic",
    "hashing",
    "linked_lists",
    "search",
    "stacks",
    "text",
    "trees",
]