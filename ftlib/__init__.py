"""Helpers for ASCII characters, byte buffers, numbers, strings, splitting, linked lists, stream output, printf-style formatting and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "numbers",
    "strings",
    "splitting",
    "linked",
    "output",
    "printf",
    "lines",
]