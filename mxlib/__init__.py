"""Helpers for characters, numbers, strings, byte buffers, sorting, linked lists, output and files."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "strings",
    "memory",
    "sorting",
    "linked_list",
    "output",
    "files",
]