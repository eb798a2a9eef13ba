"""Weapon catalogue kept in a binary search tree ordered by name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

NAME_MAX = 49
RARITY_MAX = 19

_INT_RE = re.compile(r"\s*[+-]?\d+")


@dataclass
class Weapon:
    """A weapon offered in the shop."""

    id: int
    name: str
    rarity: str
    price: float


@dataclass
class _Node:
    weapon: Weapon
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class WeaponTree:
    """Weapons ordered by name; equal names are kept, later ones after earlier."""

    def __init__(self, weapons: Iterable[Weapon] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for weapon in weapons:
            self.insert(weapon)

    def insert(self, weapon: Weapon) -> None:
        """Add a weapon to the tree."""
        node = _Node(weapon)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if weapon.name < current.weapon.name:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, name: str) -> Optional[Weapon]:
        """Return the weapon with exactly this name, or None."""
        current = self._root
        while current is not None:
            if name == current.weapon.name:
                return current.weapon
            current = current.left if name < current.weapon.name else current.right
        return None

    def by_name(self) -> list[Weapon]:
        """All weapons in name order."""
        return list(self)

    def by_rarity(self) -> list[Weapon]:
        """All weapons ordered by rarity label."""
        return sorted(self, key=lambda weapon: weapon.rarity)

    def __iter__(self) -> Iterator[Weapon]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.weapon
            current = current.right

    def __len__(self) -> int:
        return self._size


def format_weapon(weapon: Weapon) -> str:
    """One listing line for a weapon."""
    return f"[{weapon.id}] {weapon.name} ({weapon.rarity}) - R${weapon.price:.2f}"


def _parse_line(line: str) -> Optional[Weapon]:
    fields = line.rstrip("\r\n").split(";")
    if len(fields) != 4:
        return None
    raw_id, name, rarity, raw_price = fields
    if not _INT_RE.fullmatch(raw_id):
        return None
    if not 0 < len(name) <= NAME_MAX or not 0 < len(rarity) <= RARITY_MAX:
        return None
    raw_price = raw_price.strip()
    if "_" in raw_price:
        return None
    try:
        price = float(raw_price)
    except ValueError:
        return None
    return Weapon(int(raw_id), name, rarity, price)


def load_weapons(path: Union[str, Path]) -> WeaponTree:
    """Read 'id;name;rarity;price' lines, skipping malformed ones."""
    tree = WeaponTree()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            weapon = _parse_line(line)
            if weapon is not None:
                tree.insert(weapon)
    return tree