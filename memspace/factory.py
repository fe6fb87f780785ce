from __future__ import annotations
from functools import lru_cache

from .core.space import MemorySpace
from .types.descriptors import SpaceConfig

DEFAULT_MAX_SIZE = SpaceConfig().max_size


@lru_cache(maxsize=1)
def get_default_space() -> MemorySpace:
    return MemorySpace(DEFAULT_MAX_SIZE)


def create_space(max_size: int = DEFAULT_MAX_SIZE) -> MemorySpace:
    return MemorySpace(max_size)


def create_space_from_config(config: SpaceConfig) -> MemorySpace:
    return MemorySpace(config.max_size)
