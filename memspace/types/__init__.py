"""
Type definitions for the memspace library.

This module contains type aliases, enums, descriptors and protocols
used throughout the library.
"""

from .aliases import Address, WordCount
from .descriptors import MemoryBlock, SpaceConfig
from .enums import OperationKind
from .protocols import IBlockAllocator, ICursor

__all__ = [
    # Aliases
    "Address",
    "WordCount",

    # Descriptors
    "MemoryBlock",
    "SpaceConfig",

    # Enums
    "OperationKind",

    # Protocols
    "IBlockAllocator",
    "ICursor",
]
