"""
Cart - Observable Store

In-memory cart owned by the application session. Every state change emits
`on_changed(cart)` synchronously so badge and order views can refresh.
"""
from decimal import Decimal
from typing import List, Optional, Tuple

from loguru import logger

from beautiful_dogs.core.events import Signal
from beautiful_dogs.cart.models import CartEntry, PriceLike, to_price


class Cart:
    """
    Ordered collection of CartEntry, at most one entry per name.

    Operations on entries that are not in the cart are silent no-ops.
    """

    def __init__(self):
        self._entries: List[CartEntry] = []
        self.on_changed = Signal("CartChanged")

    # --- Queries ---

    @property
    def entries(self) -> Tuple[CartEntry, ...]:
        return tuple(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def total(self) -> Decimal:
        return sum((e.price for e in self._entries), Decimal("0"))

    def entry_for(self, name: str) -> Optional[CartEntry]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def contains(self, name: str) -> bool:
        return self.entry_for(name) is not None

    def _index_of(self, entry: CartEntry) -> int:
        for i, existing in enumerate(self._entries):
            if existing.id == entry.id:
                return i
        return -1

    # --- Mutations ---

    def add(self, name: str, price: PriceLike) -> CartEntry:
        """
        Add `name` unless an entry with that name exists.

        Returns the entry now in the cart. A duplicate keeps its old price.
        """
        existing = self.entry_for(name)
        if existing is not None:
            logger.debug(f"Cart already holds '{name}'; add ignored")
            return existing

        entry = CartEntry(name=name, price=to_price(price))
        self._entries.append(entry)
        logger.debug(f"Cart add '{name}' at {entry.price} (count={self.count})")
        self.on_changed.emit(self)
        return entry

    def remove(self, entry: CartEntry) -> None:
        index = self._index_of(entry)
        if index < 0:
            return
        removed = self._entries.pop(index)
        logger.debug(f"Cart remove '{removed.name}' (count={self.count})")
        self.on_changed.emit(self)

    def update_price(self, entry: CartEntry, new_price: PriceLike) -> None:
        index = self._index_of(entry)
        if index < 0:
            return
        target = self._entries[index]
        price = to_price(new_price)
        unchanged = target.price == price
        target.price = price
        if unchanged:
            # Same amount, possibly new precision: stored but not announced
            return
        logger.debug(f"Cart price '{target.name}' -> {price}")
        self.on_changed.emit(self)

    def toggle(self, name: str, price: PriceLike) -> bool:
        """Add `name` if absent, remove it if present. Returns the new in-cart state."""
        existing = self.entry_for(name)
        if existing is None:
            self.add(name, price)
            return True
        self.remove(existing)
        return False

    def clear(self) -> None:
        if not self._entries:
            return
        self._entries.clear()
        logger.debug("Cart cleared")
        self.on_changed.emit(self)
