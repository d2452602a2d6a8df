"""
Beautiful Dogs - browse dog photos and videos and collect them in a cart.
"""
from beautiful_dogs.catalog import Catalog, CatalogItem, MediaKind, list_items
from beautiful_dogs.cart import Cart, CartEntry

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CatalogItem",
    "MediaKind",
    "list_items",
    "Cart",
    "CartEntry",
]
