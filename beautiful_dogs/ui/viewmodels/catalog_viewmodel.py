from typing import List, Optional

from PySide6.QtCore import Signal
from loguru import logger

from beautiful_dogs.cart import Cart
from beautiful_dogs.catalog import Catalog, CatalogItem
from beautiful_dogs.core.config import CartSettings
from ..mvvm import BindableBase, BindableProperty
from .detail_viewmodel import DetailViewModel


class CatalogViewModel(BindableBase):
    """
    ViewModel for the home grid.
    Reads the shared Catalog; opening an item yields its DetailViewModel.
    """
    selectedChanged = Signal(object)

    selected = BindableProperty(default=None, signal_name="selectedChanged")

    def __init__(self, catalog: Catalog, cart: Cart,
                 settings: Optional[CartSettings] = None, locator=None):
        super().__init__(locator)
        self.catalog = catalog
        self.cart = cart
        self.settings = settings or CartSettings()
        self.detail: Optional[DetailViewModel] = None

    @property
    def items(self) -> List[CatalogItem]:
        return list(self.catalog.items)

    @property
    def is_empty(self) -> bool:
        return len(self.catalog) == 0

    def select(self, identifier: str) -> Optional[DetailViewModel]:
        item = self.catalog.get(identifier)
        if item is None:
            logger.warning(f"No catalog item named '{identifier}'")
            return None
        self._release_detail()
        self.selected = item
        self.detail = DetailViewModel(item, self.catalog, self.cart, self.settings, self.locator)
        return self.detail

    def close_detail(self) -> None:
        """Leave the detail screen; the released view model stops following the cart."""
        self._release_detail()
        self.selected = None

    def _release_detail(self) -> None:
        if self.detail is not None:
            self.detail.dispose()
            self.detail = None
