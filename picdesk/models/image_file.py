"""Module: image_file.py

Date: 2026-10-17

This module defines the ImageFile class, which represents a single image on
disk. ImageDirectoryLoader keeps ImageFile instances in its flat image list
and only relies on their identity key (the absolute path); everything else
is payload for the consumer (file name, size, modification date, thumbnail).

Classes:
    ImageFile: Represents a single image file.
"""

import os
from datetime import datetime

from PyQt5.QtCore import QSize, Qt
from PyQt5.QtGui import QImage, QImageReader

from picdesk.config import IMAGE_EXTENSIONS, THUMBNAIL_MAX_SIZE
from picdesk.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def extension_of(path: str) -> str:
    """Lowercase extension of ``path`` without the leading dot ("" if none)."""
    _, ext = os.path.splitext(path)
    return ext[1:].lower() if ext.startswith(".") else ""


class ImageFile:
    """
    An image file in the collection.
    Two ImageFile objects are equal when they point to the same absolute path.
    """

    def __init__(self, path: str, modified: datetime | None = None, size: int = 0):
        self.full_path = os.path.abspath(path)
        self.filename = os.path.basename(self.full_path)
        self.extension = extension_of(self.filename)
        self.modified = modified if modified is not None else datetime.fromtimestamp(0)
        self.size = size
        self._thumbnail: QImage | None = None

    def __str__(self) -> str:
        return f"ImageFile({self.filename})"

    def __repr__(self) -> str:
        return f"ImageFile(full_path='{self.full_path}', modified='{self.modified}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImageFile):
            return NotImplemented
        return self.full_path == other.full_path

    def __hash__(self) -> int:
        return hash(self.full_path)

    @property
    def key(self) -> str:
        """Identity key used by key-based removal."""
        return self.full_path

    @classmethod
    def from_path(cls, file_path: str) -> "ImageFile | None":
        """
        Create an ImageFile from a path, or return None if the path is not
        a regular file with an image extension.

        Args:
            file_path: Path to the image

        Returns:
            ImageFile instance, or None when the file can't be used
        """
        if extension_of(file_path) not in IMAGE_EXTENSIONS:
            logger.debug(
                "[ImageFile] Not an image extension: %s", file_path, extra={"dev_only": True}
            )
            return None

        try:
            stat = os.stat(file_path)
        except OSError as e:
            logger.debug("[ImageFile] Cannot stat %s: %s", file_path, e)
            return None

        if not os.path.isfile(file_path):
            logger.debug("[ImageFile] Not a regular file: %s", file_path)
            return None

        return cls(file_path, datetime.fromtimestamp(stat.st_mtime), stat.st_size)

    def thumbnail(self, max_size: int = THUMBNAIL_MAX_SIZE) -> QImage:
        """
        Returns a thumbnail scaled so its longest edge is at most max_size.
        The image is read on first access and cached. A file Qt cannot decode
        gives a null QImage.
        """
        if self._thumbnail is not None:
            return self._thumbnail

        reader = QImageReader(self.full_path)
        reader.setAutoTransform(True)
        original = reader.size()
        if original.isValid() and max(original.width(), original.height()) > max_size:
            reader.setScaledSize(original.scaled(QSize(max_size, max_size), Qt.KeepAspectRatio))

        image = reader.read()
        if image.isNull():
            logger.warning(
                "[ImageFile] Failed to read thumbnail for %s: %s",
                self.full_path,
                reader.errorString(),
            )
        self._thumbnail = image
        return image
