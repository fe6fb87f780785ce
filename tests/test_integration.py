import random

import pytest

import memspace
from memspace import (
    ALLOCATION_FAILED,
    MemorySpace,
    SpaceConfig,
    create_space,
    create_space_from_config,
    get_default_space
)


def _ranges(blocks):
    return sorted(block.as_tuple() for block in blocks)


class TestPackage:
    def test_import_memspace(self):
        assert memspace.__version__ == "1.0.0"
        assert memspace.get_version_info() == (1, 0, 0)
        assert "MemorySpace" in memspace.__all__

    def test_factory_functions(self):
        assert create_space().max_size == memspace.DEFAULT_MAX_SIZE
        assert create_space(64).max_size == 64
        assert create_space_from_config(SpaceConfig(max_size=32)).max_size == 32
        assert get_default_space() is get_default_space()

    def test_config_validation(self):
        with pytest.raises(ValueError, match="must be positive"):
            SpaceConfig(max_size=0)


@pytest.mark.parametrize("seed", range(8))
class TestRandomWorkloads:
    def test_invariants_hold_after_every_request(self, seed):
        rng = random.Random(seed)
        space = MemorySpace(1000)
        live = []

        for _ in range(400):
            if live and rng.random() < 0.45:
                space.release(live.pop(rng.randrange(len(live))))
            elif rng.random() < 0.05:
                space.defragment()
            else:
                address = space.allocate(rng.randint(1, 60))
                if address != ALLOCATION_FAILED:
                    assert address not in live
                    live.append(address)

            space.check_invariants()
            assert space.free_size() + space.allocated_size() == 1000

        assert sorted(live) == sorted(block.base for block in space.allocated_blocks())

    def test_defragment_reaches_fixed_point(self, seed):
        rng = random.Random(seed)
        space = MemorySpace(500)
        live = [space.allocate(rng.randint(1, 20)) for _ in range(30)]
        live = [address for address in live if address != ALLOCATION_FAILED]
        rng.shuffle(live)
        for address in live[: len(live) // 2]:
            space.release(address)

        space.defragment()
        free = space.free_blocks()
        for a in free:
            for b in free:
                if a is not b:
                    assert a.end != b.base

        once = [block.as_tuple() for block in free]
        space.defragment()
        assert [block.as_tuple() for block in space.free_blocks()] == once
        space.check_invariants()

    def test_allocate_release_round_trip_keeps_capacity(self, seed):
        rng = random.Random(seed)
        space = MemorySpace(300)
        for _ in range(10):
            space.allocate(rng.randint(1, 25))

        free_before = space.free_size()
        address = space.allocate(rng.randint(1, 10))
        if address != ALLOCATION_FAILED:
            space.release(address)

        assert space.free_size() == free_before
        space.check_invariants()

    def test_releasing_everything_then_defragmenting_restores_space(self, seed):
        rng = random.Random(seed)
        space = MemorySpace(256)
        live = []
        while True:
            address = space.allocate(rng.randint(1, 32))
            if address == ALLOCATION_FAILED:
                break
            live.append(address)

        rng.shuffle(live)
        for address in live:
            space.release(address)

        space.defragment()
        assert _ranges(space.free_blocks()) == [(0, 256)]
        assert space.allocated_blocks() == []
