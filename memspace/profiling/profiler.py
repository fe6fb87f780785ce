"""
Operation profiler for the memspace library.

This module records wall-clock timings of allocator requests so the
benchmark command can report per-operation costs.
"""

from __future__ import annotations
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator


@dataclass
class AggregatedProfile:
    """Aggregated timing statistics for one operation name."""
    operation_name: str
    call_count: int = 0
    total_duration: float = 0.0
    min_duration: float = float('inf')
    max_duration: float = 0.0
    avg_duration: float = 0.0

    def update(self, duration: float) -> None:
        """Fold one measured call into the aggregate."""
        self.call_count += 1
        self.total_duration += duration
        self.min_duration = min(self.min_duration, duration)
        self.max_duration = max(self.max_duration, duration)
        self.avg_duration = self.total_duration / self.call_count


class OperationProfiler:
    """Collects per-operation timings."""

    def __init__(self):
        self._aggregated: Dict[str, AggregatedProfile] = {}
        self._counters: Dict[str, int] = defaultdict(int)

    @contextmanager
    def profile(self, operation_name: str) -> Iterator[None]:
        """Time the body of the ``with`` block under ``operation_name``."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start
            aggregate = self._aggregated.get(operation_name)
            if aggregate is None:
                aggregate = self._aggregated[operation_name] = AggregatedProfile(operation_name)
            aggregate.update(duration)

    def count(self, counter_name: str, amount: int = 1) -> None:
        self._counters[counter_name] += amount

    def get_profile(self, operation_name: str) -> AggregatedProfile:
        return self._aggregated[operation_name]

    def summary(self) -> Dict[str, Any]:
        return {
            'operations': {
                name: asdict(aggregate) for name, aggregate in self._aggregated.items()
            },
            'counters': dict(self._counters),
        }

    def reset(self) -> None:
        self._aggregated.clear()
        self._counters.clear()
