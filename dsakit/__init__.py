"""Linked lists, stacks, heaps, trees, searching, sorting, small problems and text patterns."""

__version__ = "0.1.0"