"""Classic algorithms on arrays, strings, linked lists and binary search."""

__version__ = "0.1.0"
__all__ = ["arrays", "binary_search", "linked_list", "strings"]