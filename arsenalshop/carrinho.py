"""Shopping session with a cart of weapons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from arsenalshop.armas import Weapon
from arsenalshop.usuarios import User


@dataclass
class Session:
    """A logged-in user and the weapons waiting in the cart."""

    user: User
    cart: list[Weapon] = field(default_factory=list)
    echo: Callable[[str], None] = field(default=print, repr=False)

    def add_to_cart(self, weapon: Weapon) -> None:
        """Append a weapon to the cart."""
        self.cart.append(weapon)
        self.echo(f"Arma adicionada ao carrinho: {weapon.name}")

    def checkout(self) -> list[Weapon]:
        """Move every cart weapon to the inventory and return them."""
        if not self.cart:
            self.echo("Carrinho vazio.")
            return []
        bought = list(self.cart)
        for weapon in bought:
            self.user.add_to_inventory(weapon)
            self.echo(f"Comprada: {weapon.name}")
        self.cart.clear()
        self.echo("Compra finalizada com sucesso!")
        return bought

    def clear_cart(self) -> None:
        """Drop everything in the cart."""
        self.cart.clear()