"""Module: section_table.py

Date: 2026-10-17

SectionTable: the (offset, length) index that maps section-local index paths
onto positions in the flat image list.

The table is rebuilt wholesale on every load and patched in place on single
image insertions and removals: the affected section changes its length by
one and every later section moves its offset by the same amount.
"""

from bisect import bisect_right
from collections.abc import Iterable, Iterator

from picdesk.core.errors import SectionIndexError, SectionInvariantError
from picdesk.models.index_path import IndexPath
from picdesk.models.section import Section


class SectionTable:
    """Ordered section descriptors that partition the image list."""

    def __init__(self, sections: Iterable[Section] = ()):
        self._sections: list[Section] = [Section(*s) for s in sections]

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SectionTable):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"SectionTable({self._sections!r})"

    @property
    def section_count(self) -> int:
        return len(self._sections)

    @property
    def item_count(self) -> int:
        """Number of images covered by the table."""
        return sum(s.length for s in self._sections)

    def descriptors(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    # =====================================
    # Lookups
    # =====================================

    def section(self, section: int) -> Section:
        """Return the descriptor of ``section``.

        Raises:
            SectionIndexError: If ``section`` is not a current section index.
        """
        if not 0 <= section < len(self._sections):
            raise SectionIndexError(
                f"Section {section} out of range (0..{len(self._sections) - 1})"
            )
        return self._sections[section]

    def length_of(self, section: int) -> int:
        return self.section(section).length

    def resolve(self, index_path: IndexPath) -> int:
        """Absolute position of the image at ``index_path``.

        Raises:
            SectionIndexError: If the section is invalid or the item is not
                inside that section.
        """
        section, item = index_path
        descriptor = self.section(section)
        if not 0 <= item < descriptor.length:
            raise SectionIndexError(
                f"Item {item} out of range for section {section} (length {descriptor.length})"
            )
        return descriptor.offset + item

    def resolve_insertion(self, index_path: IndexPath) -> int:
        """Absolute position at which an image inserted at ``index_path`` lands.

        Unlike resolve(), ``item`` may equal the section length (append to
        that section).
        """
        section, item = index_path
        descriptor = self.section(section)
        if not 0 <= item <= descriptor.length:
            raise SectionIndexError(
                f"Insertion item {item} out of range for section {section} "
                f"(length {descriptor.length})"
            )
        return descriptor.offset + item

    def section_of(self, position: int) -> int:
        """Index of the section that owns absolute ``position``."""
        if not 0 <= position < self.item_count:
            raise SectionIndexError(f"Position {position} out of range (0..{self.item_count - 1})")
        # Last section starting at or before position; empty sections that
        # share its offset come earlier and are skipped.
        return bisect_right(self._sections, position, key=lambda s: s.offset) - 1

    def index_path_of(self, position: int) -> IndexPath:
        section = self.section_of(position)
        return IndexPath(section, position - self._sections[section].offset)

    # =====================================
    # Incremental patching
    # =====================================

    def grow(self, section: int) -> None:
        """One more image in ``section``; later sections move down by one."""
        self._patch(section, 1)

    def shrink(self, section: int) -> None:
        """One image fewer in ``section``; later sections move up by one."""
        if self.section(section).length == 0:
            raise SectionIndexError(f"Section {section} is already empty")
        self._patch(section, -1)

    def _patch(self, section: int, delta: int) -> None:
        offset, length = self.section(section)
        self._sections[section] = Section(offset, length + delta)
        for i in range(section + 1, len(self._sections)):
            later = self._sections[i]
            self._sections[i] = Section(later.offset + delta, later.length)

    # =====================================
    # Invariant
    # =====================================

    def check_partition(self, item_count: int) -> None:
        """Verify that the sections cover ``[0, item_count)`` without gaps.

        Raises:
            SectionInvariantError: On any gap, overlap or count mismatch.
        """
        expected_offset = 0
        for index, (offset, length) in enumerate(self._sections):
            if offset != expected_offset or length < 0:
                raise SectionInvariantError(
                    f"Section {index} is ({offset}, {length}), expected offset {expected_offset}"
                )
            expected_offset += length
        if expected_offset != item_count:
            raise SectionInvariantError(
                f"Sections cover {expected_offset} images, list holds {item_count}"
            )
