# arsenalshop

A small library for an in-game weapon shop. It provides:

- a weapon catalogue kept in a binary search tree ordered by name,
- an item tree ordered by name,
- a directory of user accounts, each with an inventory,
- a shopping session with a cart,
- reading and writing of plain-text catalogue and user files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Weapons (`arsenalshop.armas`)

`Weapon` holds `id`, `name`, `rarity` (a text label) and `price`.
`WeaponTree` keeps weapons ordered by name. Weapons with equal names are all
kept, a later one after an earlier one.

```python
from arsenalshop.armas import Weapon, WeaponTree, format_weapon, load_weapons

tree = WeaponTree([Weapon(2, "Sword", "Epic", 25.0), Weapon(1, "Axe", "Rare", 10.0)])
tree.insert(Weapon(3, "Bow", "Common", 7.5))

len(tree)                  # 3
[w.name for w in tree]     # ['Axe', 'Bow', 'Sword']  (iteration is in name order)
tree.by_name()             # the same, as a list
tree.by_rarity()           # sorted by the rarity label as text
tree.find("Sword")         # the Sword weapon; None when no name matches exactly

format_weapon(tree.find("Axe"))   # '[1] Axe (Rare) - R$10.00'
```

`load_weapons(path)` reads a UTF-8 file with one `id;name;rarity;price` line
per weapon and returns a `WeaponTree`. Lines that do not parse (wrong number
of fields, a non-integer id, a non-numeric price, an empty name or rarity, a
name longer than 49 characters or a rarity longer than 19) are skipped. A
missing file raises `FileNotFoundError`.

## Items (`arsenalshop.itens`)

`Item` holds `id`, `name`, `kind`, `rarity` (an integer, 1 to 5), `power` and
`price`. `ItemTree` stores items by name with `insert`, `find`, iteration in
name order and `len`.

```python
from arsenalshop.itens import Item, ItemTree, format_item

items = ItemTree([Item(1, "Potion", "Consumivel", 2, 5, 3.5)])
format_item(items.find("Potion"))
# '-> Potion [Consumivel] | Poder: 5 | Raridade: 2 | R$3.50'
```

## Users and inventories (`arsenalshop.usuarios`)

`UserDirectory` keeps users with the most recently registered first.
`login` returns the first user whose e-mail and password both match, or
`None`.

```python
from arsenalshop.usuarios import UserDirectory

users = UserDirectory()
password = "password"
alice = users.register("Alice", "alice@example.com", password)
assert users.login("alice@example.com", password) is alice

alice.add_to_inventory(items.find("Potion"))   # newest entry goes first
alice.inventory_lines()
# ['Inventário de Alice:', '-> Potion [Consumivel] | Poder 5']
```

`User.inventory` is a plain list and accepts any object.
`inventory_lines` reads `name`, `kind` and `power` from each entry, so it
works for `Item` entries but raises `AttributeError` for `Weapon` entries.

## Shopping cart (`arsenalshop.carrinho`)

A `Session` joins a user to a cart of weapons. Its messages go through
`echo`, which defaults to `print`.

```python
from arsenalshop.carrinho import Session

session = Session(alice, echo=lambda message: None)
session.add_to_cart(tree.find("Sword"))
bought = session.checkout()     # [Sword weapon]; the cart is now empty
session.clear_cart()
```

`checkout` adds each weapon in the cart to the user's inventory in the order
it was added. Because each one goes to the front, the last weapon added ends
up first in the inventory. An empty cart reports "Carrinho vazio." and
returns `[]`.

## Storage (`arsenalshop.storage`)

- `load_catalog(path)` reads `id;name;type;damage;rarity;price` lines into
  `CatalogWeapon` records (`id`, `name`, `kind`, `damage`, `rarity`,
  `price`) and returns them sorted by name. Blank lines are skipped. Reading
  stops at the first malformed line.
- `save_catalog(weapons, stream)` writes the records to an open text stream
  in name order, with the price to two decimals.
- `load_users(path)` reads `name;email;password` lines into a
  `UserDirectory`, stopping at the first malformed line. Since each user is
  registered at the front, the directory lists the file's users in reverse.
- `save_users(users, path)` writes any iterable of users, in iteration order.

## What it does not do

There is no command-line program or interactive menu. Inventories are not
saved or loaded. `WeaponTree` has no save function. `storage` handles only
the catalogue and user formats described above.