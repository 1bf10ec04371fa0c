"""Classic algorithms on linked lists, binary trees, arrays and sorted sequences."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "search", "tree"]