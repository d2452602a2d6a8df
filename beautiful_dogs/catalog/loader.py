"""
Catalog - Media Folder Loader

Lists the bundled media folder and turns matching files into CatalogItems.
"""
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from beautiful_dogs.catalog.models import (
    CatalogItem,
    MediaKind,
    IMAGE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)


def _normalize(extensions: Iterable[str]) -> Tuple[str, ...]:
    return tuple(ext.lstrip(".").lower() for ext in extensions)


def classify(
    filename: str,
    image_extensions: Iterable[str] = IMAGE_EXTENSIONS,
    video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
) -> Optional[CatalogItem]:
    """
    Build a CatalogItem for a single file name.

    Returns None when the extension is on neither allow-list.
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return None

    ext = ext.lower()
    if ext in _normalize(image_extensions):
        return CatalogItem(identifier=stem, kind=MediaKind.IMAGE, filename=filename)
    if ext in _normalize(video_extensions):
        return CatalogItem(identifier=filename, kind=MediaKind.VIDEO, filename=filename)
    return None


def list_items(
    directory: str,
    image_extensions: Iterable[str] = IMAGE_EXTENSIONS,
    video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
) -> List[CatalogItem]:
    """
    Scan `directory` once and return its media items.

    Order follows the directory enumeration and is not sorted. A missing or
    unreadable directory yields an empty list.
    """
    image_extensions = _normalize(image_extensions)
    video_extensions = _normalize(video_extensions)
    items: List[CatalogItem] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if not entry.is_file():
                        continue
                except OSError as e:
                    logger.warning(f"Cannot access {entry.path}: {e}")
                    continue

                item = classify(entry.name, image_extensions, video_extensions)
                if item is not None:
                    items.append(item)
    except OSError as e:
        logger.error(f"Cannot read media directory {directory}: {e}")
        return []

    logger.debug(f"Listed {len(items)} media items in {directory}")
    return items


class Catalog:
    """
    The catalog loaded once at startup.

    Every view shares the same instance instead of re-listing the folder.
    """

    NOT_FOUND = {
        MediaKind.IMAGE: "Image not found",
        MediaKind.VIDEO: "Video not found",
    }

    def __init__(self, directory: str, items: Iterable[CatalogItem] = ()):
        self.directory = directory
        self._items: Tuple[CatalogItem, ...] = tuple(items)

    @classmethod
    def load(
        cls,
        directory: str,
        image_extensions: Iterable[str] = IMAGE_EXTENSIONS,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
    ) -> "Catalog":
        items = list_items(directory, image_extensions, video_extensions)
        logger.info(f"Catalog loaded: {len(items)} items from {directory}")
        return cls(directory, items)

    @property
    def items(self) -> Tuple[CatalogItem, ...]:
        return self._items

    @property
    def images(self) -> Tuple[CatalogItem, ...]:
        return tuple(i for i in self._items if i.kind is MediaKind.IMAGE)

    @property
    def videos(self) -> Tuple[CatalogItem, ...]:
        return tuple(i for i in self._items if i.kind is MediaKind.VIDEO)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def __contains__(self, identifier: object) -> bool:
        return self.get(identifier) is not None

    def get(self, identifier) -> Optional[CatalogItem]:
        """First item with this identifier, or None."""
        for item in self._items:
            if item.identifier == identifier:
                return item
        return None

    def resolve_path(self, item: CatalogItem) -> Optional[str]:
        """
        Absolute path of the asset behind `item`.

        Returns None when the file is gone; the caller shows a placeholder.
        """
        path = Path(self.directory) / item.filename
        if not path.is_file():
            logger.warning(f"Media asset missing: {path}")
            return None
        return str(path.resolve())

    def placeholder_text(self, item: CatalogItem) -> str:
        return self.NOT_FOUND[item.kind]
