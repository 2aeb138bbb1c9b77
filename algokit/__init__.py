"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "backtracking",
    "caches",
    "linked_lists",
    "monotonic",
    "numeric",
    "streams",
    "windows",
]