"""
Event System - synchronous observer notifications.

Usage:
    from beautiful_dogs.core.events import Signal

    changed = Signal("CartChanged")
    changed.connect(on_cart_changed)
    changed.emit(cart)
"""
from .observer import Signal


__all__ = ["Signal"]
