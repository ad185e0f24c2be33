"""Character, byte-buffer, string, conversion, output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "transform",
    "convert",
    "output",
    "linkedlist",
]