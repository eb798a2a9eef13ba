from arsenalshop.itens import Item
from arsenalshop.usuarios import User, UserDirectory


def test_register_prepends():
    directory = UserDirectory()
    directory.register("Ana", "ana@example.com", "password")
    directory.register("Bia", "bia@example.com", "secret")
    assert [u.name for u in directory] == ["Bia", "Ana"]
    assert len(directory) == 2


def test_login_matches_email_and_password():
    directory = UserDirectory()
    ana = directory.register("Ana", "ana@example.com", "password")
    assert directory.login("ana@example.com", "password") is ana
    assert directory.login("ana@example.com", "secret") is None
    assert directory.login("bia@example.com", "password") is None


def test_inventory_newest_first():
    password = "password"
    user = User("Ana", "ana@example.com", password=password)
    first = Item(1, "Pocao", "Consumivel", 1, 5, 2.5)
    second = Item(2, "Escudo", "Defesa", 2, 15, 40.0)
    user.add_to_inventory(first)
    user.add_to_inventory(second)
    assert user.inventory == [second, first]


def test_inventory_lines():
    password = "password"
    user = User("Ana", "ana@example.com", password=password)
    user.add_to_inventory(Item(1, "Pocao", "Consumivel", 1, 5, 2.5))
    assert user.inventory_lines() == ["Inventário de Ana:", "-> Pocao [Consumivel] | Poder 5"]


def test_empty_inventory_has_only_header():
    password = "password"
    user = User("Ana", "ana@example.com", password=password)
    assert user.inventory_lines() == ["Inventário de Ana:"]