"""picdesk: sectioned index over the images of a folder.

Public API:
    ImageDirectoryLoader, ImageFile, IndexPath, Section, SectionLayout,
    assign_sections, scan_directory and the picdesk exceptions.
"""

from picdesk.config import APP_VERSION as __version__
from picdesk.core.directory_scanner import scan_directory
from picdesk.core.errors import (
    PicdeskError,
    SectionConfigurationError,
    SectionIndexError,
    SectionInvariantError,
)
from picdesk.core.image_directory_loader import ImageDirectoryLoader
from picdesk.core.section_policy import SectionLayout, assign_sections
from picdesk.models import ImageFile, IndexPath, Section

__all__ = [
    "ImageDirectoryLoader",
    "ImageFile",
    "IndexPath",
    "PicdeskError",
    "Section",
    "SectionConfigurationError",
    "SectionIndexError",
    "SectionInvariantError",
    "SectionLayout",
    "__version__",
    "assign_sections",
    "scan_directory",
]
