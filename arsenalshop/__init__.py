"""Weapon shop toolkit: name-ordered weapon and item trees, users, carts and text storage."""

__version__ = "0.1.0"