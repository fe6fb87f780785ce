"""
Profiling and metrics components for the memspace library.

This module provides fragmentation metrics and per-operation timing
for memory spaces.
"""

from .metrics import FragmentationMetrics
from .profiler import AggregatedProfile, OperationProfiler

__all__ = [
    "AggregatedProfile",
    "FragmentationMetrics",
    "OperationProfiler",
]
