"""Character, byte, string, number, array, output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "chars",
    "linked_list",
    "memory",
    "numbers",
    "output",
    "strings",
    "transform",
]