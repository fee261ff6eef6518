"""Doubly-linked circular lists of vertices.

A :class:`VertexNode` has two neighbour slots.  When the list has a
direction, slot ``0`` is the next node and slot ``1`` the previous one,
so an edge can be named by a node plus a slot index.

The arrangement engine edits a face's boundary in place through
:func:`link_to_next` only.  Face reconstruction from unordered edges uses
:meth:`VertexNode.link_to` and :meth:`VertexNode.walk` instead.
"""

from __future__ import annotations

import itertools
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")

NEXT = 0
PREV = 1


class VertexNode(Generic[T]):
    """One vertex of a linked cycle.

    *id* is immutable and unique within the owning :class:`LinkedCycle`;
    it is only used to order otherwise indistinguishable vertices.
    """

    __slots__ = ("value", "id", "traversed", "_links")

    def __init__(self, value: T, node_id: int) -> None:
        self.value = value
        self.id = node_id
        self.traversed = False
        self._links: List[Optional[VertexNode[T]]] = [None, None]

    def neighbor(self, direction: int) -> Optional["VertexNode[T]"]:
        """Next node for *direction* ``0``, previous node for ``1``."""
        return self._links[direction]

    @property
    def next(self) -> Optional["VertexNode[T]"]:
        return self._links[NEXT]

    @property
    def prev(self) -> Optional["VertexNode[T]"]:
        return self._links[PREV]

    def link_to(self, other: "VertexNode[T]") -> None:
        """Link two nodes without a notion of direction.

        Fills the first empty slot on both sides.
        """
        for a, b in ((self, other), (other, self)):
            if a._links[0] is None:
                a._links[0] = b
            elif a._links[1] is None:
                a._links[1] = b
            else:
                raise ValueError(f"Node {a.id} is already linked to two other nodes")

    def walk(self) -> List[T]:
        """Values of the chain through this node, without backtracking.

        Works on lists linked by :meth:`link_to`, where slot order says
        nothing about direction.  Marks every visited node as traversed.
        """
        cycle = [self.value]
        self.traversed = True
        node = self._links[0]
        while node is not None and not node.traversed:
            node.traversed = True
            cycle.append(node.value)
            back = node._links[1]
            node = node._links[0] if back is not None and back.traversed else back
        return cycle

    def __repr__(self) -> str:
        return f"VertexNode({self.id}, {self.value!r})"


def link_to_next(node: VertexNode[T], following: VertexNode[T]) -> None:
    """Make *following* the next node of *node*, and *node* its previous."""
    node._links[NEXT] = following
    following._links[PREV] = node


def extract_cycle(start: VertexNode[T]) -> List[T]:
    """Walk next links from *start* until the loop closes.

    Every visited node is marked as traversed; the walk also stops at a
    node that an earlier extraction already claimed.
    """
    cycle = [start.value]
    start.traversed = True
    node = start.next
    while node is not None and not node.traversed:
        node.traversed = True
        cycle.append(node.value)
        node = node.next
    return cycle


class LinkedCycle(Generic[T]):
    """Owner of every node created while processing one face.

    The initial *values* are linked in order into a single closed loop.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._ids = itertools.count()
        self.nodes: List[VertexNode[T]] = []
        for value in values:
            node = self.new_node(value)
            if len(self.nodes) > 1:
                link_to_next(self.nodes[-2], node)
        if self.nodes:
            link_to_next(self.nodes[-1], self.nodes[0])

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> VertexNode[T]:
        return self.nodes[index]

    def new_node(self, value: T) -> VertexNode[T]:
        """Create an unlinked node owned by this cycle."""
        node = VertexNode(value, next(self._ids))
        self.nodes.append(node)
        return node

    def extract_loops(self) -> List[List[T]]:
        """Split the current topology into its closed loops."""
        return [extract_cycle(node) for node in self.nodes if not node.traversed]
