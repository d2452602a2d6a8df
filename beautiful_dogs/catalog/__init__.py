"""
Catalog - browsable dog photos and videos from the bundled media folder.
"""
from .models import CatalogItem, MediaKind, IMAGE_EXTENSIONS, VIDEO_EXTENSIONS
from .loader import Catalog, classify, list_items

__all__ = [
    "Catalog",
    "CatalogItem",
    "MediaKind",
    "IMAGE_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "classify",
    "list_items",
]
