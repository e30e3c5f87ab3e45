"""Sorting algorithms (insertion, merge, heap), a max binary heap and a binary search tree."""

__version__ = "0.1.0"