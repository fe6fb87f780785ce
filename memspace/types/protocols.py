"""
Protocol definitions for the memspace library.

These protocols describe the seams between the allocator engine and the
sequence it walks, so alternative engines can be checked structurally.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Protocol, runtime_checkable

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from .descriptors import MemoryBlock


@runtime_checkable
class ICursor(Protocol):
    """Forward cursor that survives removal of the node it points at."""

    @property
    def current(self) -> Optional[object]: ...

    def has_next(self) -> bool: ...

    def advance(self) -> None: ...

    def __iter__(self) -> Self: ...


@runtime_checkable
class IBlockAllocator(Protocol):
    """Interface for simulated allocators over a flat address range."""

    @property
    def max_size(self) -> int: ...

    def allocate(self, length: int) -> int: ...

    def release(self, address: int) -> None: ...

    def defragment(self) -> int: ...

    def free_blocks(self) -> List[MemoryBlock]: ...

    def allocated_blocks(self) -> List[MemoryBlock]: ...
