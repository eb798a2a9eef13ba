"""Registered users and their inventories."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass
class User:
    """A shop user; the newest inventory entry comes first."""

    name: str
    email: str
    password: str
    inventory: list[Any] = field(default_factory=list)

    def add_to_inventory(self, item: Any) -> None:
        """Put an item at the front of the inventory."""
        self.inventory.insert(0, item)

    def inventory_lines(self) -> list[str]:
        """The inventory listing, header first."""
        lines = [f"Inventário de {self.name}:"]
        lines.extend(f"-> {i.name} [{i.kind}] | Poder {i.power}" for i in self.inventory)
        return lines


class UserDirectory:
    """Users, the most recently registered first."""

    def __init__(self) -> None:
        self._users: deque[User] = deque()

    def register(self, name: str, email: str, password: str) -> User:
        """Create a user and put it at the front."""
        user = User(name, email, password)
        self._users.appendleft(user)
        return user

    def login(self, email: str, password: str) -> Optional[User]:
        """Return the first user matching both e-mail and password, or None."""
        return next(
            (u for u in self._users if u.email == email and u.password == password),
            None,
        )

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)