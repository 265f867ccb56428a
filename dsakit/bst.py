"""Binary search tree with parent links, traversals and an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Any


class _Node:
    __slots__ = ("key", "left", "right", "parent")

    def __init__(self, key: Any, parent: _Node | None = None) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """Unbalanced BST; equal keys go to the right subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def _require(self, key: Any) -> _Node:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    def insert(self, key: Any) -> None:
        """Add ``key``; duplicates are kept."""
        self._size += 1
        if self._root is None:
            self._root = _Node(key)
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, node)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, node)
                    return
                node = node.right

    def search(self, key: Any) -> Any:
        """The stored key equal to ``key``, or None when absent."""
        node = self._find(key)
        return None if node is None else node.key

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def minimum(self) -> Any:
        """Smallest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _leftmost(self._root).key

    def maximum(self) -> Any:
        """Largest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _rightmost(self._root).key

    def successor(self, key: Any) -> Any:
        """Key that follows ``key`` in order, or None if it is the largest."""
        node = self._require(key)
        if node.right is not None:
            return _leftmost(node.right).key
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return None if parent is None else parent.key

    def predecessor(self, key: Any) -> Any:
        """Key that precedes ``key`` in order, or None if it is the smallest."""
        node = self._require(key)
        if node.left is not None:
            return _rightmost(node.left).key
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return None if parent is None else parent.key

    def _replace(self, node: _Node, child: _Node | None) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; an absent key is ignored."""
        node = self._find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            heir = _leftmost(node.right)
            node.key = heir.key
            self._replace(heir, heir.right)
        else:
            self._replace(node, node.left if node.left is not None else node.right)
        self._size -= 1

    def _inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def inorder(self) -> list:
        """Keys in ascending order."""
        return list(self._inorder())

    def preorder(self) -> list:
        """Keys in node, left, right order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list:
        """Keys in left, right, node order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result


_MENU = (
    "1.Insertion\n2.Deletion\n3.Inorder Traversal\n4. Predecessor\n"
    "5.Successor\n6.Search\n7.Maximum\n8.Minimum\n9.Exit"
)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print(f"Not a number: {text}")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu over a binary search tree of integers."""
    argparse.ArgumentParser(description="Interactive binary search tree.").parse_args(argv)
    tree = BinarySearchTree()
    print(_MENU)
    try:
        while True:
            choice = _read_int("Enter your choice: ")
            if choice == 9:
                break
            if choice == 1:
                tree.insert(_read_int("Enter the key to be inserted: "))
            elif choice == 2:
                tree.delete(_read_int("Enter the key to be deleted: "))
            elif choice == 3:
                print(" ".join(str(key) for key in tree.inorder()))
            elif choice in (4, 5):
                label = "Predecessor" if choice == 4 else "Successor"
                key = _read_int(f"Which element's {label.lower()} do you want to find: ")
                try:
                    found = tree.predecessor(key) if choice == 4 else tree.successor(key)
                except KeyError:
                    print(f"{key} is not in the tree")
                    continue
                print(f"{label}: {found}" if found is not None else f"No {label.lower()}")
            elif choice == 6:
                key = _read_int("Which element you want to be searched: ")
                found = tree.search(key)
                print(f"Searched Element: {found}" if found is not None else f"{key} is not in the tree")
            elif choice in (7, 8):
                label = "Maximum" if choice == 7 else "Minimum"
                try:
                    value = tree.maximum() if choice == 7 else tree.minimum()
                except ValueError:
                    print("Tree is empty")
                    continue
                print(f"{label} node: {value}")
    except EOFError:
        pass
    return 0