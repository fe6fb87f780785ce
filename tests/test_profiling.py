import pytest

from memspace.profiling import AggregatedProfile, FragmentationMetrics, OperationProfiler
from memspace.types import MemoryBlock


class TestFragmentationMetrics:
    def test_metrics_from_blocks(self):
        free = [MemoryBlock(30, 60), MemoryBlock(0, 10), MemoryBlock(95, 5)]
        allocated = [MemoryBlock(10, 20), MemoryBlock(90, 5)]

        metrics = FragmentationMetrics.from_blocks(free, allocated, 100)

        assert metrics.total_free == 75
        assert metrics.total_allocated == 25
        assert metrics.largest_free == 60
        assert metrics.hole_count == 3
        assert metrics.allocation_count == 2
        assert metrics.mean_hole_size == pytest.approx(25.0)
        assert metrics.external_fragmentation == pytest.approx(0.2)
        assert metrics.utilization == pytest.approx(0.25)

    def test_metrics_without_free_blocks(self):
        metrics = FragmentationMetrics.from_blocks([], [MemoryBlock(0, 50)], 50)

        assert metrics.total_free == 0
        assert metrics.largest_free == 0
        assert metrics.hole_count == 0
        assert metrics.mean_hole_size == 0.0
        assert metrics.external_fragmentation == 0.0
        assert metrics.utilization == 1.0

    def test_single_hole_is_not_fragmented(self):
        metrics = FragmentationMetrics.from_blocks([MemoryBlock(0, 100)], [], 100)
        assert metrics.external_fragmentation == 0.0
        assert metrics.utilization == 0.0

    def test_as_dict_is_plain_python(self):
        data = FragmentationMetrics.from_blocks([MemoryBlock(0, 10)], [], 10).as_dict()

        assert data['total_free'] == 10
        assert type(data['total_free']) is int
        assert type(data['external_fragmentation']) is float


class TestOperationProfiler:
    def setup_method(self):
        self.profiler = OperationProfiler()

    def test_profile_aggregates_calls(self):
        for _ in range(3):
            with self.profiler.profile('allocate'):
                pass

        aggregate = self.profiler.get_profile('allocate')
        assert aggregate.call_count == 3
        assert aggregate.min_duration <= aggregate.avg_duration <= aggregate.max_duration

    def test_profile_records_failed_calls(self):
        with pytest.raises(RuntimeError):
            with self.profiler.profile('release'):
                raise RuntimeError("boom")

        assert self.profiler.get_profile('release').call_count == 1

    def test_counters_and_summary(self):
        self.profiler.count('allocation_failures')
        self.profiler.count('allocation_failures', 2)
        with self.profiler.profile('defragment'):
            pass

        summary = self.profiler.summary()
        assert summary['counters'] == {'allocation_failures': 3}
        assert summary['operations']['defragment']['call_count'] == 1

    def test_reset(self):
        with self.profiler.profile('allocate'):
            pass
        self.profiler.reset()
        assert self.profiler.summary() == {'operations': {}, 'counters': {}}

    def test_aggregated_profile_update(self):
        aggregate = AggregatedProfile('allocate')
        aggregate.update(0.5)
        aggregate.update(1.5)

        assert aggregate.call_count == 2
        assert aggregate.min_duration == 0.5
        assert aggregate.max_duration == 1.5
        assert aggregate.avg_duration == pytest.approx(1.0)
