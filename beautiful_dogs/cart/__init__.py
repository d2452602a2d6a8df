"""
Cart - in-memory order list with change notification.
"""
from .models import CartEntry, to_price
from .store import Cart

__all__ = ["Cart", "CartEntry", "to_price"]
