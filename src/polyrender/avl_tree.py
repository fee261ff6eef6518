"""Self-balancing binary search tree with a caller-supplied order.

The sweep needs more than a sorted list: the sweep-line status is ordered
by a comparison that depends on the current sweep position, so keys cannot
be precomputed.  :class:`AvlTree` only ever asks its *compare* callable
for the sign of ``compare(a, b)``.

Nodes keep parent links, so :meth:`AvlTree.next` and :meth:`AvlTree.prev`
run in O(log n) from any node handle.  Handles stay valid until the next
deletion.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], float]


class AvlNode(Generic[T]):
    __slots__ = ("key", "left", "right", "parent", "height")

    def __init__(self, key: T) -> None:
        self.key = key
        self.left: Optional[AvlNode[T]] = None
        self.right: Optional[AvlNode[T]] = None
        self.parent: Optional[AvlNode[T]] = None
        self.height = 0

    def left_height(self) -> int:
        return self.left.height if self.left is not None else -1

    def right_height(self) -> int:
        return self.right.height if self.right is not None else -1

    def balance(self) -> int:
        return self.left_height() - self.right_height()

    def update_height(self) -> None:
        self.height = max(self.left_height(), self.right_height()) + 1

    def link_left(self, node: Optional["AvlNode[T]"]) -> None:
        if self.left is not None and self.left.parent is self:
            self.left.parent = None
        self.left = node
        if node is not None:
            node.parent = self

    def link_right(self, node: Optional["AvlNode[T]"]) -> None:
        if self.right is not None and self.right.parent is self:
            self.right.parent = None
        self.right = node
        if node is not None:
            node.parent = self

    def rotate_right(self) -> "AvlNode[T]":
        other = self.left
        assert other is not None
        self.link_left(other.right)
        other.parent = None
        other.link_right(self)
        self.update_height()
        other.update_height()
        return other

    def rotate_left(self) -> "AvlNode[T]":
        other = self.right
        assert other is not None
        self.link_right(other.left)
        other.parent = None
        other.link_left(self)
        self.update_height()
        other.update_height()
        return other

    def __repr__(self) -> str:
        return f"AvlNode({self.key!r})"


def _rebalance(root: AvlNode[T]) -> AvlNode[T]:
    root.update_height()
    balance = root.balance()

    if balance > 1:
        assert root.left is not None
        if root.left.balance() < 0:
            # Left right case
            root.link_left(root.left.rotate_left())
        return root.rotate_right()

    if balance < -1:
        assert root.right is not None
        if root.right.balance() > 0:
            # Right left case
            root.link_right(root.right.rotate_right())
        return root.rotate_left()

    return root


def _min_node(root: AvlNode[T]) -> AvlNode[T]:
    while root.left is not None:
        root = root.left
    return root


def _max_node(root: AvlNode[T]) -> AvlNode[T]:
    while root.right is not None:
        root = root.right
    return root


class AvlTree(Generic[T]):
    """AVL tree of keys ordered by *compare* (negative, zero or positive).

    Keys comparing equal are duplicates: :meth:`insert` refuses them.
    """

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._root: Optional[AvlNode[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self.find_minimum_node()
        while node is not None:
            yield node.key
            node = self.next(node)

    def is_empty(self) -> bool:
        return self._size == 0

    # ── insertion ───────────────────────────────────────────────────

    def insert(self, key: T) -> Optional[AvlNode[T]]:
        """Insert *key*; return its node, or ``None`` if an equal key exists."""
        inserted: list[AvlNode[T]] = []
        self._set_root(self._insert(key, self._root, inserted))
        if not inserted:
            return None
        self._size += 1
        return inserted[0]

    def _insert(
        self, key: T, root: Optional[AvlNode[T]], inserted: list
    ) -> AvlNode[T]:
        if root is None:
            node = AvlNode(key)
            inserted.append(node)
            return node

        result = self._compare(key, root.key)
        if result < 0:
            root.link_left(self._insert(key, root.left, inserted))
        elif result > 0:
            root.link_right(self._insert(key, root.right, inserted))
        else:
            return root

        return _rebalance(root)

    # ── deletion ────────────────────────────────────────────────────

    def delete(self, key: T) -> bool:
        """Remove the node whose key compares equal to *key*."""
        removed: list[bool] = []
        self._set_root(self._delete(key, self._root, removed))
        if not removed:
            return False
        self._size -= 1
        return True

    def _delete(
        self, key: T, root: Optional[AvlNode[T]], removed: list
    ) -> Optional[AvlNode[T]]:
        if root is None:
            return None

        result = self._compare(key, root.key)
        if result < 0:
            root.link_left(self._delete(key, root.left, removed))
        elif result > 0:
            root.link_right(self._delete(key, root.right, removed))
        else:
            removed.append(True)
            if root.left is None or root.right is None:
                child = root.left if root.left is not None else root.right
                if child is not None:
                    child.parent = None
                return child
            # Two children: pull up the in-order successor.
            successor = _min_node(root.right)
            root.key = successor.key
            root.link_right(self._remove_min(root.right))

        return _rebalance(root)

    def _remove_min(self, root: AvlNode[T]) -> Optional[AvlNode[T]]:
        if root.left is None:
            child = root.right
            if child is not None:
                child.parent = None
            return child
        root.link_left(self._remove_min(root.left))
        return _rebalance(root)

    def _set_root(self, root: Optional[AvlNode[T]]) -> None:
        if root is not None:
            root.parent = None
        self._root = root

    # ── lookup ──────────────────────────────────────────────────────

    def get_node(self, key: T) -> Optional[AvlNode[T]]:
        node = self._root
        while node is not None:
            result = self._compare(key, node.key)
            if result == 0:
                return node
            node = node.left if result < 0 else node.right
        return None

    def contains(self, key: T) -> bool:
        return self.get_node(key) is not None

    def find_minimum_node(self) -> Optional[AvlNode[T]]:
        return _min_node(self._root) if self._root is not None else None

    def find_minimum(self) -> Optional[T]:
        node = self.find_minimum_node()
        return node.key if node is not None else None

    def find_maximum_node(self) -> Optional[AvlNode[T]]:
        return _max_node(self._root) if self._root is not None else None

    def find_maximum(self) -> Optional[T]:
        node = self.find_maximum_node()
        return node.key if node is not None else None

    def next(self, node: AvlNode[T]) -> Optional[AvlNode[T]]:
        """In-order successor of *node*."""
        if node.right is not None:
            return _min_node(node.right)
        while node.parent is not None:
            if node.parent.left is node:
                return node.parent
            node = node.parent
        return None

    def prev(self, node: AvlNode[T]) -> Optional[AvlNode[T]]:
        """In-order predecessor of *node*."""
        if node.left is not None:
            return _max_node(node.left)
        while node.parent is not None:
            if node.parent.right is node:
                return node.parent
            node = node.parent
        return None

    # ── validation ──────────────────────────────────────────────────

    def check_sorted(self) -> bool:
        """Whether consecutive keys are strictly increasing under *compare*.

        The order may depend on external state (e.g. a sweep position),
        so a tree built correctly can become unsorted later.
        """
        node = self.find_minimum_node()
        if node is None:
            return True
        following = self.next(node)
        while following is not None:
            if not self._compare(node.key, following.key) < 0:
                return False
            node = following
            following = self.next(following)
        return True

    def __repr__(self) -> str:
        return f"AvlTree({list(self)!r})"
