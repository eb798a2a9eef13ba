from arsenalshop.armas import Weapon
from arsenalshop.carrinho import Session
from arsenalshop.usuarios import User


def _session(messages):
    password = "password"
    user = User("Ana", "ana@example.com", password=password)
    return Session(user, echo=messages.append)


def test_add_to_cart_keeps_order():
    messages = []
    session = _session(messages)
    arco = Weapon(1, "Arco", "Rara", 35.5)
    faca = Weapon(2, "Faca", "Comum", 5.0)
    session.add_to_cart(arco)
    session.add_to_cart(faca)
    assert session.cart == [arco, faca]
    assert messages[0] == "Arma adicionada ao carrinho: Arco"


def test_checkout_moves_to_inventory():
    messages = []
    session = _session(messages)
    arco = Weapon(1, "Arco", "Rara", 35.5)
    faca = Weapon(2, "Faca", "Comum", 5.0)
    session.add_to_cart(arco)
    session.add_to_cart(faca)
    bought = session.checkout()
    assert bought == [arco, faca]
    assert session.cart == []
    assert session.user.inventory == [faca, arco]
    assert messages[-1] == "Compra finalizada com sucesso!"
    assert "Comprada: Faca" in messages


def test_checkout_empty_cart():
    messages = []
    session = _session(messages)
    assert session.checkout() == []
    assert messages == ["Carrinho vazio."]
    assert session.user.inventory == []


def test_clear_cart():
    messages = []
    session = _session(messages)
    session.add_to_cart(Weapon(1, "Arco", "Rara", 35.5))
    session.clear_cart()
    assert session.cart == []
    assert session.checkout() == []