"""First-in, first-out queues: linear array, circular buffer and linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("queue size must be at least 1")


class ArrayQueue:
    """A linear queue over ``size`` slots, the first of which is never used.

    At most ``size - 1`` values may ever be enqueued; slots freed by
    dequeueing are not reused, so the queue can be empty and full at once.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self._capacity = size - 1
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("This Queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("This Queue is empty")
        value = self._items[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        return islice(self._items, self._front, None)


class CircularQueue:
    """A ring-buffer queue over ``size`` slots holding up to ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self._size = size
        self._buffer: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("This Queue is full")
        self._rear = (self._rear + 1) % self._size
        self._buffer[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("This Queue is empty")
        self._front = (self._front + 1) % self._size
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        return value

    def is_empty(self) -> bool:
        return self._rear == self._front

    def is_full(self) -> bool:
        return (self._rear + 1) % self._size == self._front

    def __len__(self) -> int:
        return (self._rear - self._front) % self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        for offset in range(1, len(self) + 1):
            yield self._buffer[(self._front + offset) % self._size]


@dataclass(eq=False)
class _QueueNode:
    data: Any
    next: Optional[_QueueNode] = None


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_QueueNode] = None
        self._rear: Optional[_QueueNode] = None
        self._count = 0

    def enqueue(self, value: Any) -> None:
        node = _QueueNode(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._count += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("Queue is Empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.data

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next