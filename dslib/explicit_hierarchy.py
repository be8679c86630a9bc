"""Hierarchies whose blocks are linked to their parents and sons explicitly."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from dslib.hierarchy import Hierarchy
from dslib.memory import MemoryBlock, MemoryManager

B = TypeVar("B", bound="ExplicitHierarchyBlock")

LEFT_SON_INDEX = 0
RIGHT_SON_INDEX = 1


@dataclass(eq=False)
class ExplicitHierarchyBlock(MemoryBlock):
    """A block that knows its parent."""

    parent: Optional[ExplicitHierarchyBlock] = field(default=None, repr=False)

    # Blocks are places in a structure: two blocks are the same only if identical.
    __eq__ = object.__eq__
    __hash__ = object.__hash__


@dataclass(eq=False)
class MultiWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with any number of sons, kept in order."""

    sons: list = field(default_factory=list)


@dataclass(eq=False)
class KWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with a fixed number of son slots, some of which may be empty."""

    sons: list = field(default_factory=list)


@dataclass(eq=False)
class BinaryExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with a left and a right son."""

    left: Optional[BinaryExplicitHierarchyBlock] = None
    right: Optional[BinaryExplicitHierarchyBlock] = None


class ExplicitHierarchy(Hierarchy[B], Generic[B]):
    """A hierarchy made of separately allocated, linked blocks."""

    def __init__(self, block_type: Callable[[], B]) -> None:
        self._memory: MemoryManager[B] = MemoryManager(block_type)
        self._root: Optional[B] = None

    @abstractmethod
    def emplace_son(self, parent: B, son_order: int) -> B:
        """Create a son of ``parent`` at ``son_order`` and return it."""

    @abstractmethod
    def change_son(self, parent: B, son_order: int, new_son: Optional[B]) -> None:
        """Put ``new_son`` at ``son_order`` under ``parent``."""

    @abstractmethod
    def remove_son(self, parent: B, son_order: int) -> None:
        """Remove the son at ``son_order`` together with its subtree."""

    def _spawn(self) -> ExplicitHierarchy[B]:
        return type(self)()

    def _compatible(self, other: object) -> bool:
        return type(other) is type(self)

    def __len__(self) -> int:
        return self.node_count(self._root) if self._root is not None else 0

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        """Release every block of the hierarchy."""
        self.process_post_order(self._root, self._memory.release_memory)
        self._root = None

    def copy(self) -> ExplicitHierarchy[B]:
        return self._spawn().assign(self)

    def assign(self, other: ExplicitHierarchy[B]) -> ExplicitHierarchy[B]:
        """Make this hierarchy a deep copy of ``other``."""
        if not self._compatible(other):
            raise TypeError("can only assign a hierarchy of the same kind")
        if other is self:
            return self

        def copy_subtree(mine: B, theirs: B) -> None:
            mine.data = theirs.data
            son_count = other.degree(theirs)
            copied = 0
            order = 0
            while copied < son_count:
                their_son = other.access_son(theirs, order)
                if their_son is not None:
                    copy_subtree(self.emplace_son(mine, order), their_son)
                    copied += 1
                order += 1

        self.clear()
        if other._root is not None:
            copy_subtree(self.emplace_root(), other._root)
        return self

    def equals(self, other: object) -> bool:
        """Whether ``other`` has the same shape and the same data."""
        if not self._compatible(other):
            return False

        def compare(mine: Optional[B], theirs: Optional[B]) -> bool:
            if mine is None and theirs is None:
                return True
            if mine is None or theirs is None:
                return False
            if self.degree(mine) != other.degree(theirs):
                return False
            if not (mine.data == theirs.data):
                return False
            son_count = self.degree(mine)
            processed = 0
            order = 0
            while processed < son_count:
                my_son = self.access_son(mine, order)
                their_son = other.access_son(theirs, order)
                if my_son is not None:
                    processed += 1
                if not compare(my_son, their_son):
                    return False
                order += 1
            return True

        return compare(self._root, other._root)

    def access_root(self) -> Optional[B]:
        return self._root

    def access_parent(self, node: B) -> Optional[B]:
        return node.parent

    def emplace_root(self) -> B:
        """Allocate a new root block and return it."""
        self._root = self._memory.allocate_memory()
        return self._root

    def change_root(self, new_root: Optional[B]) -> None:
        """Make ``new_root`` the root, detaching it from any parent."""
        if new_root is not None:
            new_root.parent = None
        self._root = new_root


class MultiWayExplicitHierarchy(ExplicitHierarchy[MultiWayExplicitHierarchyBlock]):
    """An explicit hierarchy whose nodes have any number of ordered sons."""

    def __init__(self) -> None:
        super().__init__(MultiWayExplicitHierarchyBlock)

    def degree(self, node: MultiWayExplicitHierarchyBlock) -> int:
        return len(node.sons)

    def access_son(
        self, node: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> Optional[MultiWayExplicitHierarchyBlock]:
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> MultiWayExplicitHierarchyBlock:
        """Insert a new son at ``son_order``, shifting later sons right."""
        if not 0 <= son_order <= len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        son = self._memory.allocate_memory()
        parent.sons.insert(son_order, son)
        son.parent = parent
        return son

    def change_son(
        self,
        parent: MultiWayExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[MultiWayExplicitHierarchyBlock],
    ) -> None:
        self._check_order(parent, son_order)
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: MultiWayExplicitHierarchyBlock, son_order: int) -> None:
        """Release the son at ``son_order`` with its subtree and close the gap."""
        self._check_order(parent, son_order)
        self.process_post_order(parent.sons[son_order], self._memory.release_memory)
        del parent.sons[son_order]

    @staticmethod
    def _check_order(parent: MultiWayExplicitHierarchyBlock, son_order: int) -> None:
        if not 0 <= son_order < len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")


class KWayExplicitHierarchy(ExplicitHierarchy[KWayExplicitHierarchyBlock]):
    """An explicit hierarchy whose nodes have ``k`` son slots."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("a k-way hierarchy needs at least one son slot")
        self._k = k
        super().__init__(lambda: KWayExplicitHierarchyBlock(sons=[None] * k))

    @property
    def k(self) -> int:
        return self._k

    def _spawn(self) -> KWayExplicitHierarchy:
        return KWayExplicitHierarchy(self._k)

    def _compatible(self, other: object) -> bool:
        return super()._compatible(other) and other.k == self._k

    def degree(self, node: KWayExplicitHierarchyBlock) -> int:
        return sum(1 for son in node.sons if son is not None)

    def access_son(
        self, node: KWayExplicitHierarchyBlock, son_order: int
    ) -> Optional[KWayExplicitHierarchyBlock]:
        if 0 <= son_order < self._k:
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: KWayExplicitHierarchyBlock, son_order: int
    ) -> KWayExplicitHierarchyBlock:
        """Put a new son into slot ``son_order``."""
        self._check_order(son_order)
        son = self._memory.allocate_memory()
        parent.sons[son_order] = son
        son.parent = parent
        return son

    def change_son(
        self,
        parent: KWayExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[KWayExplicitHierarchyBlock],
    ) -> None:
        self._check_order(son_order)
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: KWayExplicitHierarchyBlock, son_order: int) -> None:
        """Release the son in slot ``son_order`` with its subtree, leaving the slot empty."""
        self._check_order(son_order)
        self.process_post_order(parent.sons[son_order], self._memory.release_memory)
        parent.sons[son_order] = None

    def _check_order(self, son_order: int) -> None:
        if not 0 <= son_order < self._k:
            raise IndexError(f"son order {son_order} out of range")


class BinaryExplicitHierarchy(ExplicitHierarchy[BinaryExplicitHierarchyBlock]):
    """An explicit hierarchy whose nodes have a left and a right son."""

    def __init__(self) -> None:
        super().__init__(BinaryExplicitHierarchyBlock)

    def degree(self, node: BinaryExplicitHierarchyBlock) -> int:
        return (node.left is not None) + (node.right is not None)

    def access_son(
        self, node: BinaryExplicitHierarchyBlock, son_order: int
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        if son_order == LEFT_SON_INDEX:
            return node.left
        if son_order == RIGHT_SON_INDEX:
            return node.right
        return None

    def emplace_son(
        self, parent: BinaryExplicitHierarchyBlock, son_order: int
    ) -> BinaryExplicitHierarchyBlock:
        if son_order == LEFT_SON_INDEX:
            return self.insert_left_son(parent)
        return self.insert_right_son(parent)

    def change_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        if son_order == LEFT_SON_INDEX:
            self.change_left_son(parent, new_son)
        else:
            self.change_right_son(parent, new_son)

    def remove_son(self, parent: BinaryExplicitHierarchyBlock, son_order: int) -> None:
        if son_order == LEFT_SON_INDEX:
            self.remove_left_son(parent)
        else:
            self.remove_right_son(parent)

    def access_left_son(
        self, node: BinaryExplicitHierarchyBlock
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        return node.left

    def access_right_son(
        self, node: BinaryExplicitHierarchyBlock
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        return node.right

    def is_left_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        return node.parent is not None and node.parent.left is node

    def is_right_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        return node.parent is not None and node.parent.right is node

    def has_left_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        return node.left is not None

    def has_right_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        return node.right is not None

    def insert_left_son(
        self, parent: BinaryExplicitHierarchyBlock
    ) -> BinaryExplicitHierarchyBlock:
        son = self._memory.allocate_memory()
        parent.left = son
        son.parent = parent
        return son

    def insert_right_son(
        self, parent: BinaryExplicitHierarchyBlock
    ) -> BinaryExplicitHierarchyBlock:
        son = self._memory.allocate_memory()
        parent.right = son
        son.parent = parent
        return son

    def change_left_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        old_son = parent.left
        parent.left = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def change_right_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        old_son = parent.right
        parent.right = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_left_son(self, parent: BinaryExplicitHierarchyBlock) -> None:
        self.process_post_order(parent.left, self._memory.release_memory)
        parent.left = None

    def remove_right_son(self, parent: BinaryExplicitHierarchyBlock) -> None:
        self.process_post_order(parent.right, self._memory.release_memory)
        parent.right = None