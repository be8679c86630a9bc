"""Hierarchies of memory blocks, including the array-backed implicit kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar, Union

from dslib.memory import INVALID_INDEX, CompactMemoryManager, MemoryBlock

B = TypeVar("B")


class UnavailableFunctionCall(RuntimeError):
    """Raised when an operation is not supported by a structure."""


class Hierarchy(ABC, Generic[B]):
    """A rooted tree of blocks with ordered sons."""

    @abstractmethod
    def access_root(self) -> Optional[B]:
        """The root block, or None when empty."""

    @abstractmethod
    def access_parent(self, node: B) -> Optional[B]:
        """Parent of ``node``, or None for the root."""

    @abstractmethod
    def access_son(self, node: B, son_order: int) -> Optional[B]:
        """Son of ``node`` at position ``son_order``, or None."""

    @abstractmethod
    def degree(self, node: B) -> int:
        """Number of sons ``node`` has."""

    def process_post_order(
        self, node: Optional[B], operation: Callable[[B], None]
    ) -> None:
        """Apply ``operation`` to the subtree of ``node``, sons before parents."""
        if node is None:
            return
        son_count = self.degree(node)
        found = 0
        order = 0
        while found < son_count:
            son = self.access_son(node, order)
            if son is not None:
                self.process_post_order(son, operation)
                found += 1
            order += 1
        operation(node)

    def node_count(self, node: Optional[B] = None) -> int:
        """Number of blocks in the subtree of ``node``, or in the whole hierarchy."""
        if node is None:
            node = self.access_root()
            if node is None:
                return 0
        count = 0

        def increment(_: B) -> None:
            nonlocal count
            count += 1

        self.process_post_order(node, increment)
        return count


NodeOrIndex = Union[MemoryBlock, int]


def _unavailable(method: str, **details: object) -> UnavailableFunctionCall:
    """Build the error for an operation implicit hierarchies do not offer."""
    message = f"Method {method}() unavailable in implicit hierarchies!"
    described = ", ".join(
        f"{name}={value!r}" for name, value in details.items() if value is not None
    )
    if described:
        message = f"{message} ({described})"
    return UnavailableFunctionCall(message)


class ImplicitHierarchy(Hierarchy[MemoryBlock]):
    """A complete K-ary hierarchy stored level by level in contiguous memory."""

    def __init__(self, k: int) -> None:
        if k < 2:
            raise ValueError("an implicit hierarchy needs at least two sons per node")
        self._k = k
        self._memory: CompactMemoryManager[MemoryBlock] = CompactMemoryManager()

    @property
    def k(self) -> int:
        return self._k

    def __len__(self) -> int:
        return len(self._memory)

    def is_empty(self) -> bool:
        return len(self._memory) == 0

    def clear(self) -> None:
        self._memory.clear()

    def copy(self) -> ImplicitHierarchy:
        duplicate = type(self).__new__(type(self))
        ImplicitHierarchy.__init__(duplicate, self._k)
        return duplicate.assign(self)

    def assign(self, other: ImplicitHierarchy) -> ImplicitHierarchy:
        """Make this hierarchy hold copies of ``other``'s blocks."""
        if not isinstance(other, ImplicitHierarchy) or other._k != self._k:
            raise TypeError("can only assign an implicit hierarchy of the same arity")
        self._memory.assign(other._memory)
        return self

    def equals(self, other: object) -> bool:
        if not isinstance(other, ImplicitHierarchy) or other._k != self._k:
            return False
        return self._memory.equals(other._memory)

    def _index(self, node_or_index: NodeOrIndex) -> int:
        if isinstance(node_or_index, int):
            return node_or_index
        index = self._memory.calculate_index(node_or_index)
        if index == INVALID_INDEX:
            raise ValueError("node does not belong to this hierarchy")
        return index

    def _level_of_index(self, index: int) -> int:
        # floor(log_k((k - 1) * (index + 1))), computed exactly
        value = (self._k - 1) * (index + 1)
        level = 0
        power = self._k
        while power <= value:
            level += 1
            power *= self._k
        return level

    def level(self, node_or_index: NodeOrIndex) -> int:
        index = self._index(node_or_index)
        if index < 0:
            raise IndexError(f"index {index} out of range")
        return self._level_of_index(index)

    def degree(self, node_or_index: NodeOrIndex) -> int:
        index = self._index(node_or_index)
        size = len(self)
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range")
        current_level = self._level_of_index(index)
        index_of_last = size - 1
        depth = self._level_of_index(index_of_last)
        if current_level == depth:
            return 0
        if current_level == depth - 1:
            lasts_parent = self.index_of_parent(index_of_last)
            if index < lasts_parent:
                return self._k
            if index > lasts_parent:
                return 0
            mod = (size - 1) % self._k
            return self._k if mod == 0 else mod
        return self._k

    def node_count(self, node: Optional[MemoryBlock] = None) -> int:
        if node is None or self._index(node) == 0:
            return len(self)
        return super().node_count(node)

    def access_root(self) -> Optional[MemoryBlock]:
        return self._memory.get_block_at(0) if len(self) > 0 else None

    def access_parent(self, node: MemoryBlock) -> Optional[MemoryBlock]:
        index = self.index_of_parent(node)
        return self._memory.get_block_at(index) if index != INVALID_INDEX else None

    def access_son(self, node: MemoryBlock, son_order: int) -> Optional[MemoryBlock]:
        index = self.index_of_son(node, son_order)
        return self._memory.get_block_at(index) if index < len(self) else None

    def access_last_leaf(self) -> Optional[MemoryBlock]:
        size = len(self)
        return self._memory.get_block_at(size - 1) if size else None

    def emplace_root(self) -> MemoryBlock:
        raise _unavailable("emplace_root")

    def change_root(self, new_root: Optional[MemoryBlock]) -> None:
        raise _unavailable(
            "change_root", new_root=None if new_root is None else new_root.data
        )

    def emplace_son(self, parent: Optional[MemoryBlock], son_order: int) -> MemoryBlock:
        raise _unavailable("emplace_son", son_order=son_order)

    def change_son(
        self,
        parent: Optional[MemoryBlock],
        son_order: int,
        new_son: Optional[MemoryBlock],
    ) -> None:
        raise _unavailable(
            "change_son",
            son_order=son_order,
            new_son=None if new_son is None else new_son.data,
        )

    def remove_son(self, parent: Optional[MemoryBlock], son_order: int) -> None:
        raise _unavailable("remove_son", son_order=son_order)

    def insert_last_leaf(self) -> MemoryBlock:
        """Append a block as the next leaf in level order."""
        return self._memory.allocate_memory()

    def remove_last_leaf(self) -> None:
        """Remove the last leaf in level order."""
        self._memory.release_last()

    def index_of_parent(self, node_or_index: NodeOrIndex) -> int:
        index = self._index(node_or_index)
        return INVALID_INDEX if index == 0 else (index - 1) // self._k

    def index_of_son(self, node_or_index: NodeOrIndex, son_order: int) -> int:
        return self._k * self._index(node_or_index) + son_order + 1


class BinaryImplicitHierarchy(ImplicitHierarchy):
    """An implicit hierarchy where every node has at most two sons."""

    def __init__(self) -> None:
        super().__init__(2)