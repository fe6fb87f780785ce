"""
memspace - Simulated First-Fit Memory Manager

A small library that models how a flat memory allocator carves a fixed
address range into blocks, without touching real memory.

Key Features:
- First-fit allocation with block splitting
- Free and allocated block lists kept as ordered linked sequences
- Caller-initiated defragmentation of adjacent free blocks
- Fragmentation metrics and a request-replay CLI
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Core components
from .core.sequence import NOT_FOUND, BlockSequence, Node, SequenceCursor
from .core.space import ALLOCATION_FAILED, MemorySpace
from .factory import (
    DEFAULT_MAX_SIZE,
    create_space,
    create_space_from_config,
    get_default_space
)

# Performance and profiling
from .profiling.metrics import FragmentationMetrics
from .profiling.profiler import OperationProfiler

# Types and descriptors
from .types.aliases import Address, WordCount
from .types.descriptors import MemoryBlock, SpaceConfig
from .types.enums import OperationKind
from .types.protocols import IBlockAllocator, ICursor

# Exceptions
from .exceptions import (
    BlockNotFound,
    IndexOutOfRange,
    InvalidRequest,
    MemSpaceError,
    SequenceError,
    SpaceCorruption
)

# Public API
__all__ = [
    # Core components
    "ALLOCATION_FAILED",
    "NOT_FOUND",
    "BlockSequence",
    "MemorySpace",
    "Node",
    "SequenceCursor",
    "DEFAULT_MAX_SIZE",
    "create_space",
    "create_space_from_config",
    "get_default_space",

    # Performance
    "FragmentationMetrics",
    "OperationProfiler",

    # Types
    "Address",
    "WordCount",
    "MemoryBlock",
    "SpaceConfig",
    "OperationKind",
    "IBlockAllocator",
    "ICursor",

    # Exceptions
    "BlockNotFound",
    "IndexOutOfRange",
    "InvalidRequest",
    "MemSpaceError",
    "SequenceError",
    "SpaceCorruption",
]

# Version info
VERSION_INFO = tuple(map(int, __version__.split('.')))

def get_version() -> str:
    """Get the current version string."""
    return __version__

def get_version_info() -> tuple[int, ...]:
    """Get version as tuple of integers."""
    return VERSION_INFO
