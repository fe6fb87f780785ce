"""
Memory space implementation for the memspace library.

A memory space manages a flat range of word addresses ``[0, max_size)``
through two block sequences: one holding free ranges and one holding
allocated ranges. Allocation is first-fit over the free sequence in its
current order; freed blocks are appended to the tail of the free sequence
and only merged back together when ``defragment`` is called.
"""

from __future__ import annotations
import logging
from typing import List

from ..exceptions import InvalidRequest, SpaceCorruption
from ..profiling.metrics import FragmentationMetrics
from ..types.aliases import Address, WordCount
from ..types.descriptors import MemoryBlock
from .sequence import BlockSequence

logger = logging.getLogger(__name__)

ALLOCATION_FAILED = Address(-1)


class MemorySpace:
    """First-fit allocator over a simulated address range."""

    __slots__ = ('_max_size', '_free', '_allocated')

    def __init__(self, max_size: int):
        if max_size <= 0:
            raise InvalidRequest(f"Memory space size must be positive: {max_size}", max_size=max_size)

        self._max_size = max_size
        self._allocated = BlockSequence()
        self._free = BlockSequence()
        self._free.append_last(MemoryBlock(0, max_size))

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def free_list(self) -> BlockSequence:
        return self._free

    @property
    def allocated_list(self) -> BlockSequence:
        return self._allocated

    def allocate(self, length: WordCount) -> Address:
        """Allocate ``length`` words and return the block's base address.

        The first free block large enough is used. An exact fit consumes the
        free block; otherwise the block is shrunk from the front. Returns
        ``ALLOCATION_FAILED`` when no free block is large enough, in which
        case neither sequence is touched.
        """
        if length <= 0:
            raise InvalidRequest(f"Allocation length must be positive: {length}", length=length)

        cursor = self._free.iterate()
        while cursor.has_next():
            node = cursor.current
            free_block = node.block

            if free_block.length >= length:
                allocated = MemoryBlock(free_block.base, length)
                self._allocated.append_last(allocated)

                if free_block.length == length:
                    cursor.advance()
                    self._free.remove_node(node)
                else:
                    free_block.base += length
                    free_block.length -= length

                logger.debug(f"Allocated {allocated} from free block, {len(self._free)} free blocks left")
                return allocated.base

            cursor.advance()

        logger.debug(f"No free block can hold {length} words")
        return ALLOCATION_FAILED

    def release(self, address: Address) -> None:
        """Move the allocated block based at ``address`` to the free tail.

        Releasing an address that is not currently allocated does nothing.
        """
        cursor = self._allocated.iterate()
        while cursor.has_next():
            node = cursor.current
            if node.block.base == address:
                self._allocated.remove_node(node)
                self._free.append_last(node.block)
                logger.debug(f"Released {node.block}")
                return
            cursor.advance()

        logger.debug(f"Ignoring release of unallocated address {address}")

    def defragment(self) -> int:
        """Merge adjacent free blocks until none remain adjacent.

        Returns the number of merges performed.
        """
        if len(self._free) <= 1:
            return 0

        merges = 0
        while True:
            merged = self._coalesce_pass()
            if not merged:
                break
            merges += merged

        logger.debug(f"Defragmentation performed {merges} merges, {len(self._free)} free blocks left")
        return merges

    def _coalesce_pass(self) -> int:
        merges = 0
        current = self._free.first()

        while current is not None:
            following = current.next

            while following is not None:
                head, tail = current.block, following.block

                if head.precedes(tail):
                    head.length += tail.length
                    after = following.next
                    self._free.remove_node(following)
                    following = after
                    merges += 1
                elif tail.precedes(head):
                    tail.length += head.length
                    self._free.remove_node(current)
                    # current is gone; the next pass starts again from the head
                    return merges + 1
                else:
                    following = following.next

            current = current.next

        return merges

    def free_blocks(self) -> List[MemoryBlock]:
        return [block.copy() for block in self._free.blocks()]

    def allocated_blocks(self) -> List[MemoryBlock]:
        return [block.copy() for block in self._allocated.blocks()]

    def free_size(self) -> int:
        return sum(block.length for block in self._free.blocks())

    def allocated_size(self) -> int:
        return sum(block.length for block in self._allocated.blocks())

    def largest_free_block(self) -> int:
        return max((block.length for block in self._free.blocks()), default=0)

    def is_allocated(self, address: int) -> bool:
        return any(block.base == address for block in self._allocated.blocks())

    def fragmentation(self) -> FragmentationMetrics:
        return FragmentationMetrics.from_blocks(
            self._free.blocks(), self._allocated.blocks(), self._max_size
        )

    def check_invariants(self) -> None:
        """Raise SpaceCorruption if the free and allocated blocks are inconsistent."""
        for label, sequence in (('free', self._free), ('allocated', self._allocated)):
            self._check_links(label, sequence)

        free = self._free.blocks()
        allocated = self._allocated.blocks()
        every_block = sorted(free + allocated, key=lambda block: block.base)

        for block in every_block:
            if block.length <= 0:
                raise SpaceCorruption(f"Block {block} has non-positive length", block=block)
            if block.base < 0 or block.end > self._max_size:
                raise SpaceCorruption(f"Block {block} lies outside [0, {self._max_size})", block=block)

        for left, right in zip(every_block, every_block[1:]):
            if left.overlaps(right):
                raise SpaceCorruption(f"Blocks {left} and {right} overlap", blocks=(left, right))

        total = sum(block.length for block in every_block)
        if total != self._max_size:
            raise SpaceCorruption(
                f"Blocks cover {total} words, expected {self._max_size}",
                total=total, max_size=self._max_size
            )

        bases = [block.base for block in allocated]
        if len(set(bases)) != len(bases):
            raise SpaceCorruption("Duplicate allocated base address", bases=bases)

    @staticmethod
    def _check_links(label: str, sequence: BlockSequence) -> None:
        size = sequence.size()
        reached = 0
        last = None
        node = sequence.first()
        while node is not None and reached <= size:
            last = node
            reached += 1
            node = node.next

        if reached != size:
            raise SpaceCorruption(
                f"The {label} list reaches {reached} nodes but records {size}",
                reached=reached, size=size
            )

        if last is not sequence.last():
            raise SpaceCorruption(f"The {label} list tail is not its final node")

    def __str__(self) -> str:
        return f"{self._free}\n{self._allocated}"

    def __repr__(self) -> str:
        return (
            f"MemorySpace(max_size={self._max_size}, free={len(self._free)}, "
            f"allocated={len(self._allocated)})"
        )
