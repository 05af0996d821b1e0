"""Module: image_directory_loader.py

Date: 2026-10-17

ImageDirectoryLoader keeps the flat, ordered list of loaded images and
presents it as a sequence of sections, each addressed by IndexPath
(section, item).

- load() replaces the image list (or keeps it) and rebuilds the section
  table from a snapshot of the layout configuration.
- insert_at(), remove_at(), remove_by_keys() and move_to() edit the image
  list in place and patch only the affected section plus the offsets of the
  sections after it.

Consumers (e.g. a grid view data source) are notified through Qt signals.
The loader is not thread-safe: it is meant to be driven from one thread,
usually the GUI thread.

Index paths are only valid until the next mutation. Re-resolve them after
every insert/remove/move.
"""

import os
from collections.abc import Callable, Iterable, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from picdesk.config import (
    DEFAULT_SECTION_LENGTHS,
    DEFAULT_SINGLE_SECTION_MODE,
    SECTION_REMAINDER_MODE,
)
from picdesk.core.directory_scanner import scan_directory
from picdesk.core.section_policy import SectionLayout, assign_sections
from picdesk.core.section_table import SectionTable
from picdesk.models.image_file import ImageFile
from picdesk.models.index_path import IndexPath
from picdesk.models.section import Section
from picdesk.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

Scanner = Callable[[str], list[str] | None]
Materializer = Callable[[str], ImageFile | None]


class ImageDirectoryLoader(QObject):
    """Sectioned index over an ordered list of ImageFile objects.

    Configuration (read at each load, not retroactively):
        single_section_mode: Put every image in one section
        section_lengths: Desired length of each section in multi-section mode
        remainder_mode: "extend" or "strict", see section_policy
    """

    sections_reset = pyqtSignal(int)  # number of sections after a load
    item_inserted = pyqtSignal(int, int)  # section, item
    item_removed = pyqtSignal(int, int)  # section, item
    item_moved = pyqtSignal(int, int, int, int)  # from section/item, to section/item

    def __init__(
        self,
        scanner: Scanner | None = None,
        materializer: Materializer | None = None,
        parent: QObject | None = None,
    ):
        """Initialize an empty loader.

        Args:
            scanner: Lists the image paths of a folder (default: scan_directory)
            materializer: Builds an ImageFile from a path, or returns None
                (default: ImageFile.from_path)
            parent: Qt parent object
        """
        super().__init__(parent)

        self._scanner = scanner or scan_directory
        self._materializer = materializer or ImageFile.from_path

        self._image_files: list[ImageFile] = []
        self._table = SectionTable([Section(0, 0)])

        self.single_section_mode = DEFAULT_SINGLE_SECTION_MODE
        self.remainder_mode = SECTION_REMAINDER_MODE
        self._section_lengths: list[int] = list(DEFAULT_SECTION_LENGTHS)
        # True while the live table was built from _section_lengths, so that
        # inserts/removes must keep the two in step.
        self._lengths_follow_table = False

        logger.debug("[ImageDirectoryLoader] Initialized", extra={"dev_only": True})

    # =====================================
    # Configuration
    # =====================================

    @property
    def section_lengths(self) -> tuple[int, ...]:
        """Desired section lengths, including growth from inserts since the last load."""
        return tuple(self._section_lengths)

    @section_lengths.setter
    def section_lengths(self, lengths: Iterable[int]) -> None:
        self._section_lengths = list(lengths)
        self._lengths_follow_table = False

    def layout(self) -> SectionLayout:
        """Snapshot of the current layout configuration."""
        return SectionLayout(
            single_section=self.single_section_mode,
            section_lengths=tuple(self._section_lengths),
            remainder=self.remainder_mode,
        )

    # =====================================
    # Loading
    # =====================================

    def load(self, sources: Sequence[str] | None = None) -> None:
        """Replace the image list with ``sources`` and rebuild the sections.

        Args:
            sources: Image paths in display order. Paths that can't be turned
                into an ImageFile are dropped. None keeps the current images
                and only recomputes the sections.

        Raises:
            SectionConfigurationError: If the layout configuration is invalid.
        """
        layout = self.layout()

        image_files = self._image_files if sources is None else self._materialize(sources)
        table = SectionTable(assign_sections(len(image_files), layout))

        self._image_files = image_files
        self._table = table
        self._lengths_follow_table = not layout.single_section
        self._check_partition()

        logger.debug(
            "[ImageDirectoryLoader] Loaded %d images into %d sections (single_section=%s)",
            len(self._image_files),
            self._table.section_count,
            layout.single_section,
        )
        self.sections_reset.emit(self._table.section_count)

    def load_from_directory(self, folder_path: str) -> bool:
        """Scan ``folder_path`` and load the images found there.

        If the folder can't be scanned the current images are kept and only
        the sections are recomputed.

        Returns:
            True if the folder was scanned, False if the scan failed
        """
        paths = self._scanner(folder_path)
        if paths is not None:
            logger.info(
                "[ImageDirectoryLoader] %d images found in directory %s",
                len(paths),
                os.path.basename(os.path.normpath(folder_path)),
            )
            for path in paths:
                logger.debug(
                    "[ImageDirectoryLoader] %s", os.path.basename(path), extra={"dev_only": True}
                )
        self.load(paths)
        return paths is not None

    def _materialize(self, sources: Iterable[str]) -> list[ImageFile]:
        image_files = []
        dropped = 0
        for source in sources:
            image_file = self._materializer(source)
            if image_file is None:
                dropped += 1
                continue
            image_files.append(image_file)

        if dropped:
            logger.debug(
                "[ImageDirectoryLoader] Dropped %d sources that are not images", dropped
            )
        return image_files

    # =====================================
    # Lookups
    # =====================================

    @property
    def number_of_sections(self) -> int:
        return self._table.section_count

    def section_count(self) -> int:
        return self._table.section_count

    def item_count(self) -> int:
        """Total number of images in the list."""
        return len(self._image_files)

    def number_of_items_in_section(self, section: int) -> int:
        """Number of images in ``section``.

        Raises:
            SectionIndexError: If ``section`` is not a current section index.
        """
        return self._table.length_of(section)

    def item_at(self, index_path: IndexPath | tuple[int, int]) -> ImageFile:
        """Image at ``index_path``.

        Raises:
            SectionIndexError: If the path does not address an image.
        """
        return self._image_files[self._table.resolve(IndexPath(*index_path))]

    def index_path_of(self, image_file: ImageFile) -> IndexPath | None:
        """Current index path of ``image_file`` (matched by key), or None."""
        for position, candidate in enumerate(self._image_files):
            if candidate.key == image_file.key:
                return self._table.index_path_of(position)
        return None

    def items(self) -> list[ImageFile]:
        """Copy of the image list in display order."""
        return self._image_files.copy()

    def sections(self) -> tuple[Section, ...]:
        """Copy of the current section descriptors."""
        return self._table.descriptors()

    # =====================================
    # Mutations
    # =====================================

    def remove_by_keys(self, keys: Iterable[str]) -> list[ImageFile]:
        """Remove every image whose key (absolute path) is in ``keys``.

        Keys are compared as absolute paths, so relative paths (as returned by
        scan_directory for a relative folder) match too. Keys that match
        nothing are ignored. Removals run from the end of the
        list backwards so positions still to be removed don't move.

        Returns:
            The removed images, in their former display order
        """
        keys = {os.path.abspath(key) for key in keys}
        positions = [i for i, f in enumerate(self._image_files) if f.key in keys]

        removed = []
        for position in reversed(positions):
            section, item = self._table.index_path_of(position)
            removed.append(self._image_files.pop(position))
            self._table.shrink(section)
            self._sync_section_length(section, -1)
            self.item_removed.emit(section, item)

        if removed:
            self._check_partition()
            logger.debug("[ImageDirectoryLoader] Removed %d images by key", len(removed))
        removed.reverse()
        return removed

    def remove_at(self, index_path: IndexPath | tuple[int, int]) -> ImageFile:
        """Remove and return the image at ``index_path``.

        Raises:
            SectionIndexError: If the path does not address an image.
        """
        index_path = IndexPath(*index_path)
        image_file = self._remove(index_path)
        self._check_partition()
        self.item_removed.emit(index_path.section, index_path.item)
        return image_file

    def insert_at(self, image_file: ImageFile, index_path: IndexPath | tuple[int, int]) -> None:
        """Insert ``image_file`` so that it ends up at ``index_path``.

        ``index_path.item`` may equal the section length to append to the
        section.

        Raises:
            SectionIndexError: If the section is invalid or the item is
                outside ``[0, section length]``.
        """
        index_path = IndexPath(*index_path)
        self._insert(image_file, index_path)
        self._check_partition()
        self.item_inserted.emit(index_path.section, index_path.item)

    def move_to(
        self,
        source: IndexPath | tuple[int, int],
        destination: IndexPath | tuple[int, int],
    ) -> None:
        """Move the image at ``source`` to ``destination``.

        Both paths are expressed against the table as it is before the move.
        A destination at or before the source is used as is; a destination
        after the source is shifted one item back, because removing the
        source has already moved everything after it up by one.

        Raises:
            SectionIndexError: If ``source`` does not address an image or
                ``destination`` is not a valid insertion point. Nothing is
                changed in that case.
        """
        source = IndexPath(*source)
        destination = IndexPath(*destination)

        source_position = self._table.resolve(source)
        destination_position = self._table.resolve_insertion(destination)

        if destination_position <= source_position:
            target = destination
        else:
            # first slot of a later section: item - 1 would be -1, which is (s, 0) after the removal
            target = IndexPath(destination.section, max(destination.item - 1, 0))

        image_file = self._remove(source)
        self._insert(image_file, target)
        self._check_partition()

        logger.debug(
            "[ImageDirectoryLoader] Moved %s from %s to %s",
            image_file.filename,
            source,
            target,
            extra={"dev_only": True},
        )
        self.item_moved.emit(source.section, source.item, target.section, target.item)

    def _remove(self, index_path: IndexPath) -> ImageFile:
        position = self._table.resolve(index_path)
        image_file = self._image_files.pop(position)
        self._table.shrink(index_path.section)
        self._sync_section_length(index_path.section, -1)
        return image_file

    def _insert(self, image_file: ImageFile, index_path: IndexPath) -> None:
        position = self._table.resolve_insertion(index_path)
        self._image_files.insert(position, image_file)
        self._table.grow(index_path.section)
        self._sync_section_length(index_path.section, 1)

    def _sync_section_length(self, section: int, delta: int) -> None:
        """Keep the configured length of ``section`` in step with the live table,
        so that a later load() without sources reproduces the current layout."""
        if self._lengths_follow_table and section < len(self._section_lengths):
            self._section_lengths[section] = max(self._section_lengths[section] + delta, 0)

    def _check_partition(self) -> None:
        if __debug__:
            self._table.check_partition(len(self._image_files))
