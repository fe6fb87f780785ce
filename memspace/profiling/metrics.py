"""
Fragmentation metrics for the memspace library.

This module summarizes the free and allocated block layout of a memory
space into a small set of numbers suitable for reports and benchmarks.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable

import numpy as np

from ..types.descriptors import MemoryBlock


def _lengths(blocks: Iterable[MemoryBlock]) -> np.ndarray:
    return np.fromiter((block.length for block in blocks), dtype=np.int64)


@dataclass(frozen=True)
class FragmentationMetrics:
    """Snapshot of how a memory space is carved up."""
    max_size: int
    total_free: int
    total_allocated: int
    largest_free: int
    hole_count: int
    allocation_count: int
    mean_hole_size: float
    external_fragmentation: float
    utilization: float

    @classmethod
    def from_blocks(
        cls,
        free: Iterable[MemoryBlock],
        allocated: Iterable[MemoryBlock],
        max_size: int
    ) -> FragmentationMetrics:
        free_lengths = _lengths(free)
        allocated_lengths = _lengths(allocated)

        total_free = int(free_lengths.sum())
        total_allocated = int(allocated_lengths.sum())
        largest_free = int(free_lengths.max()) if free_lengths.size else 0

        return cls(
            max_size=max_size,
            total_free=total_free,
            total_allocated=total_allocated,
            largest_free=largest_free,
            hole_count=int(free_lengths.size),
            allocation_count=int(allocated_lengths.size),
            mean_hole_size=float(free_lengths.mean()) if free_lengths.size else 0.0,
            external_fragmentation=(
                1.0 - (largest_free / total_free) if total_free > 0 else 0.0
            ),
            utilization=total_allocated / max_size if max_size > 0 else 0.0,
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
