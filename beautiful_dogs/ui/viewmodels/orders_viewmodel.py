from decimal import Decimal
from typing import List, Tuple

from PySide6.QtCore import Signal, Slot

from beautiful_dogs.cart import Cart
from ..mvvm import BindableProperty, CartBoundViewModel


def _badge_text(count: int) -> str:
    return str(count) if count > 0 else ""


class OrdersViewModel(CartBoundViewModel):
    """
    ViewModel behind the Orders tab and its cart badge.
    """
    badgeCountChanged = Signal(int)
    badgeTextChanged = Signal(str)
    totalChanged = Signal(object)
    rowsChanged = Signal()

    badge_count = BindableProperty(default=0, signal_name="badgeCountChanged")
    badge_text = BindableProperty(default="", signal_name="badgeTextChanged")
    total = BindableProperty(default=Decimal("0"), signal_name="totalChanged")

    def __init__(self, cart: Cart, locator=None):
        super().__init__(cart, locator)
        self._rows: List[Tuple[str, Decimal]] = []
        self.refresh()

    @property
    def rows(self) -> List[Tuple[str, Decimal]]:
        """(name, price) per cart entry, in the order they were added."""
        return list(self._rows)

    @property
    def is_empty(self) -> bool:
        return not self._rows

    def refresh(self) -> None:
        self._rows = [(e.name, e.price) for e in self.cart.entries]
        self.badge_count = self.cart.count
        self.badge_text = _badge_text(self.cart.count)
        self.total = self.cart.total
        self.rowsChanged.emit()

    @Slot(int)
    def remove_row(self, row: int) -> None:
        entries = self.cart.entries
        if 0 <= row < len(entries):
            self.cart.remove(entries[row])
