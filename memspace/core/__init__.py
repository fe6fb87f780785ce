"""
Core components for the memspace library.

This module contains the ordered block sequence and the memory space
allocator built on top of it.
"""

from .sequence import NOT_FOUND, BlockSequence, Node, SequenceCursor
from .space import ALLOCATION_FAILED, MemorySpace

__all__ = [
    "ALLOCATION_FAILED",
    "NOT_FOUND",
    "BlockSequence",
    "MemorySpace",
    "Node",
    "SequenceCursor",
]
