"""Data models for picdesk.

This package contains:
- ImageFile: An image on disk, identified by its absolute path
- IndexPath: (section, item) address of an image inside the section table
- Section: (offset, length) descriptor of one section
"""

from picdesk.models.image_file import ImageFile
from picdesk.models.index_path import IndexPath
from picdesk.models.section import Section

__all__ = ["ImageFile", "IndexPath", "Section"]
