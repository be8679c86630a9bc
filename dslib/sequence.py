"""Abstract sequences and networks of memory blocks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

B = TypeVar("B")


class Sequence(ABC, Generic[B]):
    """A linear arrangement of blocks with positional access and traversal helpers."""

    @abstractmethod
    def calculate_index(self, block: B) -> int:
        """Position of ``block`` within the sequence."""

    @abstractmethod
    def access_first(self) -> Optional[B]:
        """First block, or None when the sequence is empty."""

    @abstractmethod
    def access_last(self) -> Optional[B]:
        """Last block, or None when the sequence is empty."""

    @abstractmethod
    def access(self, index: int) -> Optional[B]:
        """Block at ``index``, or None when there is none."""

    @abstractmethod
    def access_next(self, block: B) -> Optional[B]:
        """Block following ``block``, or None at the end."""

    @abstractmethod
    def access_previous(self, block: B) -> Optional[B]:
        """Block preceding ``block``, or None at the start."""

    @abstractmethod
    def insert_first(self) -> B:
        """Create a block at the start and return it."""

    @abstractmethod
    def insert_last(self) -> B:
        """Create a block at the end and return it."""

    @abstractmethod
    def insert(self, index: int) -> B:
        """Create a block at ``index`` and return it."""

    @abstractmethod
    def insert_after(self, block: B) -> B:
        """Create a block right after ``block`` and return it."""

    @abstractmethod
    def insert_before(self, block: B) -> B:
        """Create a block right before ``block`` and return it."""

    @abstractmethod
    def remove_first(self) -> None:
        """Remove the first block."""

    @abstractmethod
    def remove_last(self) -> None:
        """Remove the last block."""

    @abstractmethod
    def remove(self, index: int) -> None:
        """Remove the block at ``index``."""

    @abstractmethod
    def remove_next(self, block: B) -> None:
        """Remove the block following ``block``."""

    @abstractmethod
    def remove_previous(self, block: B) -> None:
        """Remove the block preceding ``block``."""

    def process_all_blocks_forward(self, operation: Callable[[B], None]) -> None:
        """Apply ``operation`` to every block from first to last."""
        self.process_blocks_forward(self.access_first(), operation)

    def process_all_blocks_backward(self, operation: Callable[[B], None]) -> None:
        """Apply ``operation`` to every block from last to first."""
        self.process_blocks_backward(self.access_last(), operation)

    def process_blocks_forward(
        self, block: Optional[B], operation: Callable[[B], None]
    ) -> None:
        """Apply ``operation`` to ``block`` and every block after it."""
        while block is not None:
            operation(block)
            block = self.access_next(block)

    def process_blocks_backward(
        self, block: Optional[B], operation: Callable[[B], None]
    ) -> None:
        """Apply ``operation`` to ``block`` and every block before it."""
        while block is not None:
            operation(block)
            block = self.access_previous(block)

    def find_block_with_property(self, predicate: Callable[[B], bool]) -> Optional[B]:
        """First block satisfying ``predicate``, or None."""
        block = self.access_first()
        while block is not None and not predicate(block):
            block = self.access_next(block)
        return block

    def find_previous_to_block_with_property(
        self, predicate: Callable[[B], bool]
    ) -> Optional[B]:
        """Block just before the first one satisfying ``predicate``.

        Returns None when no block matches or when the first block matches.
        """
        current = self.access_first()
        if current is None or predicate(current):
            return None
        previous = current
        current = self.access_next(current)
        while current is not None and not predicate(current):
            previous = current
            current = self.access_next(current)
        return previous if current is not None else None


class Network(ABC, Generic[B]):
    """Nodes joined by undirected relations, reached through a gate."""

    @abstractmethod
    def relation_count(self) -> int:
        """Number of relations between nodes."""

    @abstractmethod
    def degree(self, node: B) -> int:
        """Number of relations ``node`` takes part in."""

    @abstractmethod
    def access_node_from_gate(self, order: int) -> Optional[B]:
        """Node reachable from the gate at position ``order``."""

    @abstractmethod
    def access_node_from_node(self, node: B, order: int) -> Optional[B]:
        """Neighbour of ``node`` at position ``order``."""

    @abstractmethod
    def relation_exists(self, node_a: B, node_b: B) -> bool:
        """Whether ``node_a`` and ``node_b`` are connected."""

    @abstractmethod
    def insert(self) -> B:
        """Create a new node and return it."""

    @abstractmethod
    def remove(self, node: B) -> None:
        """Remove ``node`` and its relations."""

    @abstractmethod
    def connect(self, node_a: B, node_b: B) -> None:
        """Join two nodes with a relation."""

    @abstractmethod
    def disconnect(self, node_a: B, node_b: B) -> None:
        """Remove the relation between two nodes."""