"""Classic array, search, bit, string, dynamic-programming, stack, linked-list and tree algorithms."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "bits",
    "dynamic",
    "linked_lists",
    "searching",
    "stacks",
    "strings",
    "trees",
]