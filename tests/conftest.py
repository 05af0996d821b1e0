"""
Module: conftest.py

Date: 2026-10-17

Global pytest configuration and fixtures for the picdesk test suite.
"""

import pytest

from picdesk.core.image_directory_loader import ImageDirectoryLoader
from picdesk.models.image_file import ImageFile


def image_paths(count: int, folder: str = "/photos") -> list[str]:
    """Virtual image paths img_00.jpg, img_01.jpg, ... (files need not exist)."""
    return [f"{folder}/img_{i:02d}.jpg" for i in range(count)]


def in_memory_materializer(path: str) -> ImageFile | None:
    """Builds ImageFile objects without touching the disk; ``*.broken`` paths fail."""
    if path.endswith(".broken"):
        return None
    return ImageFile(path)


def assert_partition(loader: ImageDirectoryLoader) -> None:
    """The sections cover every image exactly once, in order."""
    sections = loader.sections()
    expected_offset = 0
    for section in sections:
        assert section.offset == expected_offset
        assert section.length >= 0
        expected_offset += section.length
    assert expected_offset == loader.item_count()
    assert sections[-1].offset + sections[-1].length == loader.item_count()


@pytest.fixture
def make_loader():
    """Factory for loaders that materialize paths in memory."""

    def _make(count: int = 0, single_section: bool = True, lengths=None) -> ImageDirectoryLoader:
        loader = ImageDirectoryLoader(materializer=in_memory_materializer)
        loader.single_section_mode = single_section
        if lengths is not None:
            loader.section_lengths = lengths
        loader.load(image_paths(count))
        return loader

    return _make


@pytest.fixture
def two_sections(make_loader) -> ImageDirectoryLoader:
    """Six images split into sections (0, 3) and (3, 3)."""
    return make_loader(6, single_section=False, lengths=[3, 3])


@pytest.fixture
def image_factory():
    def _make(name: str) -> ImageFile:
        return ImageFile(f"/photos/{name}")

    return _make
