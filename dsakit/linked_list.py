"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list; positions used by insertion and deletion count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_or_none(self, index: int) -> Optional[Node]:
        return next(islice(self._nodes(), index, None), None)

    def insert_at_beginning(self, data: Any) -> Node:
        """Insert ``data`` before the first node and return the new node."""
        self.head = Node(data, self.head)
        return self.head

    def insert_at_end(self, data: Any) -> Node:
        """Append ``data`` after the last node and return the new node."""
        node = Node(data)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def insert_at_position(self, data: Any, position: int) -> Node:
        """Insert ``data`` so that it becomes the node at ``position``.

        Positions run from 1 to one past the current length.
        """
        if position < 1:
            raise IndexError("Invalid position! Node not inserted.")
        if position == 1:
            return self.insert_at_beginning(data)
        prev = self._node_or_none(position - 2)
        if prev is None:
            raise IndexError("Invalid position! Node not inserted.")
        return self.insert_after(prev, data)

    def insert_after(self, node: Node, data: Any) -> Node:
        """Insert ``data`` directly after ``node`` and return the new node."""
        new = Node(data, node.next)
        node.next = new
        return new

    def delete_from_beginning(self) -> Any:
        """Remove the first node and return its data."""
        if self.head is None:
            raise IndexError("List is empty! Nothing to delete.")
        node = self.head
        self.head = node.next
        return node.data

    def delete_from_end(self) -> Any:
        """Remove the last node and return its data."""
        if self.head is None:
            raise IndexError("List is empty! Nothing to delete.")
        if self.head.next is None:
            data = self.head.data
            self.head = None
            return data
        prev = self.head
        while prev.next.next is not None:
            prev = prev.next
        data = prev.next.data
        prev.next = None
        return data

    def delete_from_position(self, position: int) -> Any:
        """Remove the node at ``position`` (from 1) and return its data."""
        if self.head is None:
            raise IndexError("List is empty! Nothing to delete.")
        if position < 1:
            raise IndexError("Invalid position! Node not deleted.")
        if position == 1:
            return self.delete_from_beginning()
        prev = self._node_or_none(position - 2)
        if prev is None or prev.next is None:
            raise IndexError("Invalid position! Node not deleted.")
        target = prev.next
        prev.next = target.next
        return target.data

    def node_at(self, index: int) -> Node:
        """Return the node at ``index``, counting from 0."""
        node = self._node_or_none(index) if index >= 0 else None
        if node is None:
            raise IndexError(f"no node at index {index}")
        return node

    def alternate(self) -> Iterator[Any]:
        """Yield the data of the first, third, fifth, ... nodes."""
        return islice(self, 0, None, 2)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{data} -> " for data in self) + "NULL"