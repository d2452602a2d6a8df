"""
Catalog - Data Models

Immutable description of one browsable media item.
"""
from dataclasses import dataclass
from enum import Enum

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg")
VIDEO_EXTENSIONS = ("mp4", "mov")


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class CatalogItem:
    """
    One entry of the catalog grid.

    `identifier` is what the grid displays and what the cart stores as the
    entry name. Images drop their extension, videos keep the file name.
    """
    identifier: str
    kind: MediaKind
    filename: str

    @property
    def is_video(self) -> bool:
        return self.kind is MediaKind.VIDEO

    @property
    def extension(self) -> str:
        _, _, ext = self.filename.rpartition(".")
        return ext.lower()
