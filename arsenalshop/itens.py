"""Items kept in a binary search tree ordered by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Item:
    """An item with a type, a rarity from 1 to 5, power and price."""

    id: int
    name: str
    kind: str
    rarity: int
    power: int
    price: float


@dataclass
class _Node:
    item: Item
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class ItemTree:
    """Items ordered by name; equal names go after earlier ones."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, item: Item) -> None:
        """Add an item to the tree."""
        node = _Node(item)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if item.name < current.item.name:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, name: str) -> Optional[Item]:
        """Return the item with exactly this name, or None."""
        current = self._root
        while current is not None:
            if name == current.item.name:
                return current.item
            current = current.left if name < current.item.name else current.right
        return None

    def __iter__(self) -> Iterator[Item]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.item
            current = current.right

    def __len__(self) -> int:
        return self._size


def format_item(item: Item) -> str:
    """One listing line for an item."""
    return (
        f"-> {item.name} [{item.kind}] | Poder: {item.power} "
        f"| Raridade: {item.rarity} | R${item.price:.2f}"
    )