from decimal import Decimal
from typing import Optional

from PySide6.QtCore import Signal, Slot
from loguru import logger

from beautiful_dogs.cart import Cart, to_price
from beautiful_dogs.catalog import Catalog, CatalogItem
from beautiful_dogs.core.config import CartSettings
from ..mvvm import BindableProperty, CartBoundViewModel


class DetailViewModel(CartBoundViewModel):
    """
    ViewModel for the single item detail screen.
    Exposes the media to show and the add/remove affordance bound to the cart.
    """
    inCartChanged = Signal(bool)
    priceChanged = Signal(object)

    in_cart = BindableProperty(default=False, signal_name="inCartChanged")
    price = BindableProperty(default=None, signal_name="priceChanged")

    def __init__(self, item: CatalogItem, catalog: Catalog, cart: Cart,
                 settings: Optional[CartSettings] = None, locator=None):
        super().__init__(cart, locator)
        self.item = item
        self.catalog = catalog
        self.settings = settings or CartSettings()
        self.refresh()

    @property
    def title(self) -> str:
        return self.item.identifier

    @property
    def media_path(self) -> Optional[str]:
        return self.catalog.resolve_path(self.item)

    @property
    def placeholder(self) -> Optional[str]:
        """Text shown instead of the media when the asset is missing."""
        if self.media_path is None:
            return self.catalog.placeholder_text(self.item)
        return None

    def refresh(self) -> None:
        entry = self.cart.entry_for(self.item.identifier)
        self.in_cart = entry is not None
        self.price = entry.price if entry is not None else None

    @Slot()
    def add_to_cart(self) -> None:
        self.cart.add(self.item.identifier, self.settings.default_price)

    @Slot()
    def remove_from_cart(self) -> None:
        entry = self.cart.entry_for(self.item.identifier)
        if entry is not None:
            self.cart.remove(entry)

    @Slot()
    def toggle_cart(self) -> None:
        self.cart.toggle(self.item.identifier, self.settings.default_price)

    def set_price(self, value) -> bool:
        """
        Admin-only price edit for this item's cart entry.

        Returns False when admin mode is off or the item is not in the cart.
        Raises ValueError for an invalid price.
        """
        if not self.settings.admin_mode:
            logger.warning(f"Price edit for '{self.title}' refused: admin mode is off")
            return False

        entry = self.cart.entry_for(self.item.identifier)
        if entry is None:
            logger.debug(f"Price edit for '{self.title}' ignored: not in cart")
            return False

        price: Decimal = to_price(value)
        self.cart.update_price(entry, price)
        return True
