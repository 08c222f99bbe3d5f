"""A singly linked list with indexed insertion, removal and lookup, plus a short demo."""

__version__ = "0.1.0"
__all__ = ["linked_list", "demo"]