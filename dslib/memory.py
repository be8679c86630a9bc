"""Memory managers that hand out and reclaim blocks holding a single value."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TextIO, TypeVar

INVALID_INDEX = (1 << 64) - 1
"""Index returned when a block does not belong to a structure."""

B = TypeVar("B")


@dataclass
class MemoryBlock:
    """The smallest unit of storage: a slot holding one value."""

    data: Any = None


class MemoryManager(Generic[B]):
    """Allocates individual blocks and keeps count of the live ones."""

    def __init__(self, block_type: Callable[[], B] = MemoryBlock) -> None:
        self._block_type = block_type
        self._allocated = 0

    def allocate_memory(self) -> B:
        """Create a fresh block and count it as allocated."""
        self._allocated += 1
        return self._block_type()

    def release_memory(self, block: B) -> None:
        """Give a block back; it must have been allocated here."""
        if self._allocated == 0:
            raise ValueError("no blocks are allocated")
        self._allocated -= 1

    def allocated_block_count(self) -> int:
        return self._allocated


class CompactMemoryManager(MemoryManager[B]):
    """Keeps blocks contiguous, in order, within a capacity that grows on demand."""

    INIT_SIZE = 4

    def __init__(
        self, size: int = INIT_SIZE, block_type: Callable[[], B] = MemoryBlock
    ) -> None:
        if size < 0:
            raise ValueError("capacity cannot be negative")
        super().__init__(block_type)
        self._blocks: list[B] = []
        self._capacity = size

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[B]:
        return iter(self._blocks)

    def allocated_block_count(self) -> int:
        return len(self._blocks)

    def capacity(self) -> int:
        return self._capacity

    def allocate_memory(self) -> B:
        """Append a new block after the last one."""
        return self.allocate_memory_at(len(self._blocks))

    def allocate_memory_at(self, index: int) -> B:
        """Insert a new block at ``index``, shifting later blocks right."""
        if not 0 <= index <= len(self._blocks):
            raise IndexError(f"cannot allocate at index {index}")
        if len(self._blocks) == self._capacity:
            self.change_capacity(2 * len(self._blocks) or self.INIT_SIZE)
        block = self._block_type()
        self._blocks.insert(index, block)
        return block

    def release_memory(self, block: B) -> None:
        """Release ``block`` and every block that follows it."""
        self._blocks = self._blocks[: self._index_or_raise(block)]

    def release_memory_at(self, index: int) -> None:
        """Release the block at ``index``, shifting later blocks left."""
        self._check_index(index)
        del self._blocks[index]

    def release_last(self) -> None:
        """Release the last allocated block."""
        if not self._blocks:
            raise IndexError("no blocks are allocated")
        self._blocks.pop()

    def assign(self, other: CompactMemoryManager[B]) -> CompactMemoryManager[B]:
        """Make this manager hold copies of ``other``'s blocks and its capacity."""
        if self is not other:
            self._block_type = other._block_type
            self._blocks = [_copy.copy(block) for block in other._blocks]
            self._capacity = other._capacity
        return self

    def copy(self) -> CompactMemoryManager[B]:
        return CompactMemoryManager(self._capacity, self._block_type).assign(self)

    def change_capacity(self, new_capacity: int) -> None:
        """Resize the capacity, releasing blocks that no longer fit."""
        if new_capacity < 0:
            raise ValueError("capacity cannot be negative")
        if new_capacity == self._capacity:
            return
        if new_capacity < len(self._blocks):
            del self._blocks[new_capacity:]
        self._capacity = new_capacity

    def shrink_memory(self) -> None:
        """Reduce capacity to the number of blocks, but never below the initial size."""
        self.change_capacity(max(len(self._blocks), self.INIT_SIZE))

    def clear(self) -> None:
        self._blocks.clear()

    def equals(self, other: CompactMemoryManager[B]) -> bool:
        return self is other or self._blocks == other._blocks

    def calculate_index(self, block: B) -> int:
        """Position of ``block``, or INVALID_INDEX if it is not held here."""
        for index, candidate in enumerate(self._blocks):
            if candidate is block:
                return index
        return INVALID_INDEX

    def get_block_at(self, index: int) -> B:
        self._check_index(index)
        return self._blocks[index]

    def swap(self, index1: int, index2: int) -> None:
        """Exchange the blocks at two positions."""
        self._check_index(index1)
        self._check_index(index2)
        blocks = self._blocks
        blocks[index1], blocks[index2] = blocks[index2], blocks[index1]

    def dump(self, out: TextIO) -> None:
        """Write a slot-by-slot picture of the managed storage."""
        count = len(self._blocks)
        out.write("first = 0\n")
        out.write(f"last = {count}\n")
        out.write(f"limit = {self._capacity}\n")
        for index in range(self._capacity):
            line = f"{index}|{self._blocks[index]!r}|" if index < count else f"{index}|free|"
            if index == 0:
                line += "<- first"
            elif index == count:
                line += "<- last"
            out.write(line + "\n")
        out.write(f"{self._capacity}|<- limit\n")

    def _index_or_raise(self, block: B) -> int:
        index = self.calculate_index(block)
        if index == INVALID_INDEX:
            raise ValueError("block is not managed by this manager")
        return index

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._blocks):
            raise IndexError(f"index {index} out of range")