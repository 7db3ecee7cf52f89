"""Binary search trees: nodes, traversals, search, insertion and deletion."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class DuplicatePolicy(enum.Enum):
    """What inserting a key that is already in the tree does."""

    IGNORE = "ignore"
    RIGHT = "right"
    REJECT = "reject"


class DuplicateKeyError(ValueError):
    """Raised when inserting a key already present under DuplicatePolicy.REJECT."""


def preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree in root, left, right order."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree in left, root, right order."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.data
        current = current.right


def postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the data of the tree in left, right, root order."""
    stack: list[TreeNode] = []
    current = node
    last_visited: Optional[TreeNode] = None
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            current = top.right
        else:
            yield top.data
            last_visited = stack.pop()


def is_bst(node: Optional[TreeNode]) -> bool:
    """Return True when the in-order keys are strictly increasing."""
    return all(earlier < later for earlier, later in pairwise(inorder(node)))


def search(node: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the node holding ``key``, or None when it is absent."""
    while node is not None:
        if key == node.data:
            return node
        node = node.left if key < node.data else node.right
    return None


class BinarySearchTree:
    """A binary search tree whose handling of repeated keys is set by ``policy``."""

    def __init__(
        self,
        keys: Iterable[Any] = (),
        policy: DuplicatePolicy = DuplicatePolicy.IGNORE,
    ) -> None:
        self.root: Optional[TreeNode] = None
        self.policy = policy
        self._count = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> TreeNode:
        """Insert ``key`` and return its node.

        Under IGNORE a repeated key leaves the tree unchanged and its existing
        node is returned; under RIGHT it goes into the right subtree; under
        REJECT it raises DuplicateKeyError.
        """
        new = TreeNode(key)
        if self.root is None:
            self.root = new
            self._count += 1
            return new
        parent = self.root
        while True:
            if key == parent.data:
                if self.policy is DuplicatePolicy.IGNORE:
                    return parent
                if self.policy is DuplicatePolicy.REJECT:
                    raise DuplicateKeyError(f"Cannot insert {key!r}, already in BST")
            if key < parent.data:
                if parent.left is None:
                    parent.left = new
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = new
                    break
                parent = parent.right
        self._count += 1
        return new

    def search(self, key: Any) -> Optional[TreeNode]:
        """Return the node holding ``key``, or None when it is absent."""
        return search(self.root, key)

    def delete(self, key: Any) -> bool:
        """Remove one node holding ``key``; return whether anything was removed.

        A node with two children takes the key of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and key != node.data:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1
        return True

    def minimum(self) -> Any:
        """Return the smallest key; raises ValueError for an empty tree."""
        if self.root is None:
            raise ValueError("the tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def preorder(self) -> Iterator[Any]:
        return preorder(self.root)

    def inorder(self) -> Iterator[Any]:
        return inorder(self.root)

    def postorder(self) -> Iterator[Any]:
        return postorder(self.root)

    def is_valid(self) -> bool:
        """Return True when the keys are strictly increasing in order."""
        return is_bst(self.root)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return self._count