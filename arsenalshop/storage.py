"""Reading and writing the weapon catalogue and user files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from arsenalshop.usuarios import User, UserDirectory

_INT_RE = re.compile(r"\s*[+-]?\d+")

NAME_MAX = 49
KIND_MAX = 29
EMAIL_MAX = 49
PASSWORD_MAX = 19


@dataclass
class CatalogWeapon:
    """A catalogue weapon with type, damage and numeric rarity."""

    id: int
    name: str
    kind: str
    damage: int
    rarity: int
    price: float


def _parse_weapon(line: str) -> Optional[CatalogWeapon]:
    fields = line.rstrip("\r\n").split(";")
    if len(fields) != 6:
        return None
    raw_id, name, kind, raw_damage, raw_rarity, raw_price = fields
    if not all(_INT_RE.fullmatch(v) for v in (raw_id, raw_damage, raw_rarity)):
        return None
    if not 0 < len(name) <= NAME_MAX or not 0 < len(kind) <= KIND_MAX:
        return None
    raw_price = raw_price.strip()
    if "_" in raw_price:
        return None
    try:
        price = float(raw_price)
    except ValueError:
        return None
    return CatalogWeapon(int(raw_id), name, kind, int(raw_damage), int(raw_rarity), price)


def load_catalog(path: Union[str, Path]) -> list[CatalogWeapon]:
    """Read weapons in name order, stopping at the first malformed line."""
    weapons: list[CatalogWeapon] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            weapon = _parse_weapon(line)
            if weapon is None:
                break
            weapons.append(weapon)
    return sorted(weapons, key=lambda w: w.name)


def save_catalog(weapons: Iterable[CatalogWeapon], stream: TextIO) -> None:
    """Write weapons in name order, one per line."""
    for w in sorted(weapons, key=lambda w: w.name):
        stream.write(f"{w.id};{w.name};{w.kind};{w.damage};{w.rarity};{w.price:.2f}\n")


def _parse_user(line: str) -> Optional[tuple[str, str, str]]:
    fields = line.lstrip().rstrip("\n").split(";", 2)
    if len(fields) != 3:
        return None
    name, email, secret = fields
    if not 0 < len(name) <= NAME_MAX or not 0 < len(email) <= EMAIL_MAX:
        return None
    if not 0 < len(secret) <= PASSWORD_MAX:
        return None
    return name, email, secret


def load_users(path: Union[str, Path]) -> UserDirectory:
    """Read 'name;email;password' lines, stopping at the first malformed one."""
    directory = UserDirectory()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            parsed = _parse_user(line)
            if parsed is None:
                break
            directory.register(*parsed)
    return directory


def save_users(users: Iterable[User], path: Union[str, Path]) -> None:
    """Write users in iteration order."""
    with open(path, "w", encoding="utf-8") as handle:
        for user in users:
            handle.write(f"{user.name};{user.email};{user.password}\n")