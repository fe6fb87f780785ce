"""
Ordered block sequence for the memspace library.

This module provides the singly-linked sequence of memory blocks used as
both the free list and the allocated list of a memory space, together with
the explicit cursor the allocator uses to walk it.
"""

from __future__ import annotations
import sys
from typing import List, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ..exceptions import BlockNotFound, IndexOutOfRange
from ..types.descriptors import MemoryBlock

NOT_FOUND = -1


class Node:
    """A sequence node holding one memory block."""

    __slots__ = ('block', 'next')

    def __init__(self, block: MemoryBlock, next: Optional[Node] = None):
        self.block = block
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.block})"


class SequenceCursor:
    """Forward cursor over the nodes of a BlockSequence.

    The cursor exposes ``current`` and an explicit ``advance`` step so a
    caller may remove the node it is visiting and then move past it.
    Removed nodes keep their ``next`` link, which is what makes advancing
    after a removal safe. Reading ``current`` between the removal and the
    advance is not supported.
    """

    __slots__ = ('_current',)

    def __init__(self, start: Optional[Node]):
        self._current = start

    @property
    def current(self) -> Optional[Node]:
        return self._current

    def has_next(self) -> bool:
        return self._current is not None

    def advance(self) -> None:
        if self._current is not None:
            self._current = self._current.next

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Node:
        node = self._current
        if node is None:
            raise StopIteration
        self._current = node.next
        return node


class BlockSequence:
    """Singly-linked ordered sequence of memory blocks."""

    __slots__ = ('_first', '_last', '_size')

    def __init__(self):
        self._first: Optional[Node] = None
        self._last: Optional[Node] = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def first(self) -> Optional[Node]:
        return self._first

    def last(self) -> Optional[Node]:
        return self._last

    def _check_position(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(
                f"Index {index} out of range for sequence of size {self._size}",
                index=index, size=self._size
            )

    def node_at(self, index: int) -> Node:
        """Get the node at ``index``; valid indices are 0 to size - 1."""
        self._check_position(index)
        current = self._first
        for _ in range(index):
            current = current.next
        return current

    def block_at(self, index: int) -> MemoryBlock:
        return self.node_at(index).block

    def insert_at(self, index: int, block: MemoryBlock) -> None:
        """Insert ``block`` so that it ends up at position ``index``.

        Index 0 makes it the head and index ``size()`` makes it the tail,
        both in constant time. Any other position walks to the predecessor.
        """
        if index < 0 or index > self._size:
            raise IndexOutOfRange(
                f"Insert index {index} out of range for sequence of size {self._size}",
                index=index, size=self._size
            )

        if index == 0:
            self.prepend_first(block)
        elif index == self._size:
            self.append_last(block)
        else:
            previous = self.node_at(index - 1)
            previous.next = Node(block, previous.next)
            self._size += 1

    def append_last(self, block: MemoryBlock) -> None:
        node = Node(block)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def prepend_first(self, block: MemoryBlock) -> None:
        node = Node(block, self._first)
        self._first = node
        if self._last is None:
            self._last = node
        self._size += 1

    def index_of(self, block: MemoryBlock) -> int:
        for index, node in enumerate(self):
            if node.block == block:
                return index
        return NOT_FOUND

    def remove_node(self, node: Optional[Node]) -> None:
        """Remove ``node`` by identity.

        Nodes that are not part of this sequence are ignored. The removed
        node's ``next`` link is left untouched for cursors parked on it.
        """
        if node is None or self._first is None:
            return

        if node is self._first:
            self._first = node.next
            if self._first is None:
                self._last = None
            self._size -= 1
            return

        previous = self._first
        while previous.next is not None and previous.next is not node:
            previous = previous.next

        if previous.next is None:
            return

        previous.next = node.next
        if node is self._last:
            self._last = previous
        self._size -= 1

    def remove_at(self, index: int) -> None:
        self.remove_node(self.node_at(index))

    def remove_value(self, block: MemoryBlock) -> None:
        index = self.index_of(block)
        if index == NOT_FOUND:
            raise BlockNotFound(f"Block {block} is not in this sequence", block=block)
        self.remove_at(index)

    def iterate(self) -> SequenceCursor:
        return SequenceCursor(self._first)

    def blocks(self) -> List[MemoryBlock]:
        return [node.block for node in self]

    def __iter__(self) -> SequenceCursor:
        return self.iterate()

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(block) for block in self.blocks())

    def __repr__(self) -> str:
        return f"BlockSequence([{', '.join(repr(block) for block in self.blocks())}])"
