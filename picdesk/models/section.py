"""Module: section.py

Date: 2026-10-17

Section descriptor: where a section starts in the flat image list and how
many images it holds.
"""

from typing import NamedTuple


class Section(NamedTuple):
    """One contiguous run of the image list."""

    offset: int  # index of the first image of this section in the image list
    length: int  # number of images in the section

    @property
    def end(self) -> int:
        """Absolute position just past the last image of the section."""
        return self.offset + self.length
