"""Billing — per-season carts with discount ordering and totals."""

from .cart import Cart

__all__ = [
    "Cart",
]
