"""Module: index_path.py

Date: 2026-10-17

IndexPath value type: addresses one image by section and section-local item.
Ordering is (section, item), i.e. document order under a valid table.
"""

from typing import NamedTuple


class IndexPath(NamedTuple):
    """Position of an image relative to the current section table."""

    section: int
    item: int

    def __str__(self) -> str:
        return f"({self.section}, {self.item})"
