"""FIFO queue stored as a doubly linked list inside a growable array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

_NIL = -1
_INITIAL_CAPACITY = 10


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


@dataclass
class _Node:
    info: Any = None
    next: int = _NIL
    prev: int = _NIL


class Queue:
    """First-in, first-out queue whose nodes live in one array.

    Unused slots form a free list; the array doubles when it runs out.
    """

    def __init__(self) -> None:
        self._nodes = self._free_block(0, _INITIAL_CAPACITY)
        self._size = 0
        self._head = _NIL
        self._tail = _NIL
        self._first_empty = 0

    @staticmethod
    def _free_block(start: int, stop: int) -> list[_Node]:
        """Slots start..stop-1 chained together as a free list."""
        block = [_Node(next=i + 1) for i in range(start, stop)]
        block[-1].next = _NIL
        return block

    def _allocate(self) -> int:
        position = self._first_empty
        self._first_empty = self._nodes[position].next
        if self._first_empty != _NIL:
            self._nodes[self._first_empty].prev = _NIL
        return position

    def _free(self, position: int) -> None:
        node = self._nodes[position]
        node.info = None
        node.next = self._first_empty
        node.prev = _NIL
        if self._first_empty != _NIL:
            self._nodes[self._first_empty].prev = position
        self._first_empty = position

    def _grow(self) -> None:
        capacity = len(self._nodes)
        self._nodes.extend(self._free_block(capacity, capacity * 2))
        self._first_empty = capacity

    def push(self, elem: Any) -> None:
        """Append an element to the back of the queue."""
        if self._first_empty == _NIL:
            self._grow()
        position = self._allocate()
        node = self._nodes[position]
        node.info = elem
        node.next = _NIL
        node.prev = self._tail
        if self._tail != _NIL:
            self._nodes[self._tail].next = position
        else:
            self._head = position
        self._tail = position
        self._size += 1

    def top(self) -> Any:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueEmptyError("top from an empty queue")
        return self._nodes[self._head].info

    def pop(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueEmptyError("pop from an empty queue")
        old_head = self._head
        value = self._nodes[old_head].info
        self._head = self._nodes[old_head].next
        if self._head != _NIL:
            self._nodes[self._head].prev = _NIL
        else:
            self._tail = _NIL
        self._free(old_head)
        self._size -= 1
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from front to back without removing them."""
        position = self._head
        while position != _NIL:
            node = self._nodes[position]
            yield node.info
            position = node.next