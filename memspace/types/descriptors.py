from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class MemoryBlock:
    base: int
    length: int

    def __post_init__(self):
        if self.base < 0:
            raise ValueError(f"Invalid base address: {self.base}")

        if self.length <= 0:
            raise ValueError(f"Block length must be positive: {self.length}")

    @property
    def end(self) -> int:
        return self.base + self.length

    def overlaps(self, other: MemoryBlock) -> bool:
        return self.base < other.end and other.base < self.end

    def precedes(self, other: MemoryBlock) -> bool:
        """True when ``other`` starts exactly where this block ends."""
        return self.end == other.base

    def is_adjacent_to(self, other: MemoryBlock) -> bool:
        return self.precedes(other) or other.precedes(self)

    def copy(self) -> MemoryBlock:
        return self.__class__(self.base, self.length)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.base, self.length)

    def __str__(self) -> str:
        return f"({self.base} , {self.length})"


@dataclass(frozen=True, slots=True)
class SpaceConfig:
    max_size: int = 100
    name: str = "memspace"

    def __post_init__(self):
        if self.max_size <= 0:
            raise ValueError(f"Memory space size must be positive: {self.max_size}")
