"""
Base class for view models bound to the session cart.
"""
from beautiful_dogs.cart import Cart
from beautiful_dogs.ui.mvvm.bindable import BindableBase


class CartBoundViewModel(BindableBase):
    """
    View model that re-reads cart state on every cart change.

    Subclasses implement `refresh()` and call it at the end of their own
    __init__; afterwards the cart's `on_changed` signal drives it. Call
    `dispose()` when the view goes away so the cart stops notifying it.
    """

    def __init__(self, cart: Cart, locator=None):
        super().__init__(locator)
        self.cart = cart
        self.cart.on_changed.connect(self._on_cart_changed)

    def _on_cart_changed(self, cart: Cart) -> None:
        self.refresh()

    def refresh(self) -> None:
        raise NotImplementedError

    def dispose(self) -> None:
        self.cart.on_changed.disconnect(self._on_cart_changed)
