"""Fixed-size and linked last-in, first-out stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from or peeking into an empty stack."""


class ArrayStack:
    """A stack that holds at most ``size`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("stack size must be at least 1")
        self._size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"Stack Overflow! Cannot push {value!r} to the stack")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow! Cannot pop from the stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow! The stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)


@dataclass(eq=False)
class _StackNode:
    data: Any
    next: Optional[_StackNode] = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_StackNode] = None
        self._count = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _StackNode(value, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("Stack Underflow")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("Stack Underflow")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next