"""Classic data-structure and algorithm routines in plain Python."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "sorting", "stack", "linked_list", "text", "cli"]