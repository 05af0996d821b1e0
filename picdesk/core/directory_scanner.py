"""Module: directory_scanner.py

Date: 2026-10-17

Lists the images directly inside a folder.

Only regular, non-hidden files with an image extension are returned;
subfolders are not descended into. The result is sorted by file name so
that loading the same folder twice gives the same order.
"""

import os

from picdesk.config import IMAGE_EXTENSIONS
from picdesk.models.image_file import extension_of
from picdesk.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_image_name(filename: str) -> bool:
    """Check if file has an image extension."""
    return extension_of(filename) in IMAGE_EXTENSIONS


def scan_directory(folder_path: str) -> list[str] | None:
    """Return the image paths in ``folder_path``, or None if it can't be listed.

    Args:
        folder_path: Folder to scan (not recursive)

    Returns:
        Sorted list of image paths; None when the folder is missing or unreadable
    """
    if not os.path.isdir(folder_path):
        logger.error("[DirectoryScanner] Path is not a directory: %s", folder_path)
        return None

    file_paths = []
    try:
        with os.scandir(folder_path) as entries:
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                if not is_image_name(entry.name):
                    continue
                try:
                    if not entry.is_file():
                        continue
                except OSError as e:
                    logger.warning("[DirectoryScanner] Error checking %s: %s", entry.path, e)
                    continue
                file_paths.append(os.path.normpath(entry.path))
    except OSError as e:
        logger.error("[DirectoryScanner] Error listing directory %s: %s", folder_path, e)
        return None

    file_paths.sort(key=lambda p: (os.path.basename(p).lower(), p))
    logger.debug(
        "[DirectoryScanner] Found %d images in %s",
        len(file_paths),
        folder_path,
        extra={"dev_only": True},
    )
    return file_paths
