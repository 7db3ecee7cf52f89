"""Classic data structures and algorithms: sorting, searching, array helpers, stacks, queues, a linked list and a binary search tree."""

__version__ = "0.1.0"

__all__ = ["arrays", "bst", "linked_list", "queues", "searching", "sorting", "stack"]