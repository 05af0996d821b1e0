"""Tests for ImageDirectoryLoader loading and lookups."""

import pytest

from picdesk.core.errors import SectionConfigurationError, SectionIndexError
from picdesk.core.image_directory_loader import ImageDirectoryLoader
from picdesk.models.index_path import IndexPath
from picdesk.models.section import Section
from tests.conftest import assert_partition, image_paths, in_memory_materializer


def test_new_loader_has_one_empty_section():
    loader = ImageDirectoryLoader(materializer=in_memory_materializer)
    assert loader.section_count() == 1
    assert loader.number_of_sections == 1
    assert loader.number_of_items_in_section(0) == 0
    assert loader.item_count() == 0


@pytest.mark.parametrize("count", [0, 1, 13, 200])
def test_single_section_mode_has_one_section_of_all_items(make_loader, count):
    loader = make_loader(count)
    assert loader.section_count() == 1
    assert loader.number_of_items_in_section(0) == count
    assert_partition(loader)


def test_multi_section_layout(make_loader):
    loader = make_loader(20, single_section=False, lengths=[7, 5, 10])
    assert loader.sections() == (Section(0, 7), Section(7, 5), Section(12, 8))
    assert [loader.number_of_items_in_section(s) for s in range(3)] == [7, 5, 8]
    assert_partition(loader)


def test_default_lengths_are_used_in_multi_section_mode(make_loader):
    loader = make_loader(20, single_section=False)
    assert loader.sections() == (Section(0, 7), Section(7, 5), Section(12, 8))


def test_item_at_resolves_through_offsets(make_loader):
    loader = make_loader(20, single_section=False, lengths=[7, 5, 10])
    assert loader.item_at(IndexPath(0, 0)).filename == "img_00.jpg"
    assert loader.item_at(IndexPath(1, 0)).filename == "img_07.jpg"
    assert loader.item_at((2, 7)).filename == "img_19.jpg"


@pytest.mark.parametrize("path", [(99, 0), (0, 5), (0, -1), (-1, 0)])
def test_item_at_out_of_range_does_not_mutate(make_loader, path):
    loader = make_loader(5)
    before = (loader.items(), loader.sections())
    with pytest.raises(SectionIndexError):
        loader.item_at(IndexPath(*path))
    assert (loader.items(), loader.sections()) == before


def test_out_of_range_is_an_index_error(make_loader):
    loader = make_loader(3)
    with pytest.raises(IndexError):
        loader.number_of_items_in_section(1)


def test_load_is_idempotent(make_loader):
    loader = make_loader(30, single_section=False, lengths=[4, 6, 9])
    first = loader.sections()
    loader.load(image_paths(30))
    assert loader.sections() == first


def test_load_preserves_source_order_and_drops_failures():
    loader = ImageDirectoryLoader(materializer=in_memory_materializer)
    loader.load(["/p/b.jpg", "/p/x.broken", "/p/a.jpg"])
    assert [f.filename for f in loader.items()] == ["b.jpg", "a.jpg"]
    assert loader.number_of_items_in_section(0) == 2


def test_load_without_sources_recomputes_sections(make_loader):
    loader = make_loader(20)
    items = loader.items()
    loader.single_section_mode = False
    loader.section_lengths = [10, 10]
    assert loader.section_count() == 1  # not retroactive
    loader.load()
    assert loader.items() == items
    assert loader.sections() == (Section(0, 10), Section(10, 10))


def test_load_replaces_previous_items(make_loader):
    loader = make_loader(10)
    loader.load(["/other/one.png"])
    assert [f.filename for f in loader.items()] == ["one.png"]


def test_load_with_empty_sources_gives_one_empty_section(make_loader):
    loader = make_loader(10, single_section=False, lengths=[3, 3])
    loader.load([])
    assert loader.sections() == (Section(0, 0),)


def test_strict_remainder_raises_without_touching_state(make_loader):
    loader = make_loader(5, single_section=False, lengths=[2, 2])
    before = loader.sections()
    loader.remainder_mode = "strict"
    with pytest.raises(SectionConfigurationError):
        loader.load()
    assert loader.sections() == before


def test_strict_remainder_with_new_sources_keeps_previous_images(make_loader):
    loader = make_loader(5, single_section=False, lengths=[2, 2])
    before = (loader.items(), loader.sections())
    loader.remainder_mode = "strict"
    with pytest.raises(SectionConfigurationError):
        loader.load(image_paths(10, "/other"))
    assert (loader.items(), loader.sections()) == before
    assert_partition(loader)


def test_invalid_lengths_raise_before_replacing_items(make_loader):
    loader = make_loader(3)
    loader.section_lengths = [-1]
    with pytest.raises(SectionConfigurationError):
        loader.load(image_paths(8))
    assert loader.item_count() == 3


def test_section_lengths_setter_copies_input(make_loader):
    lengths = [2, 2]
    loader = make_loader(4, single_section=False, lengths=lengths)
    loader.insert_at(loader.item_at((0, 0)), (0, 0))
    assert lengths == [2, 2]
    assert loader.section_lengths == (3, 2)


def test_sections_reset_signal(make_loader):
    loader = make_loader(0)
    received = []
    loader.sections_reset.connect(received.append)
    loader.single_section_mode = False
    loader.section_lengths = [2, 2, 2]
    loader.load(image_paths(5))
    assert received == [3]


def test_load_from_directory_uses_scanner():
    calls = []

    def scanner(folder):
        calls.append(folder)
        return ["/photos/a.jpg", "/photos/b.jpg"]

    loader = ImageDirectoryLoader(scanner=scanner, materializer=in_memory_materializer)
    assert loader.load_from_directory("/photos") is True
    assert calls == ["/photos"]
    assert loader.item_count() == 2


def test_load_from_directory_scan_failure_keeps_items():
    loader = ImageDirectoryLoader(scanner=lambda folder: None, materializer=in_memory_materializer)
    loader.load(image_paths(4))
    assert loader.load_from_directory("/missing") is False
    assert loader.item_count() == 4
    assert loader.sections() == (Section(0, 4),)


def test_index_path_of(make_loader, image_factory):
    loader = make_loader(20, single_section=False, lengths=[7, 5, 10])
    assert loader.index_path_of(image_factory("img_08.jpg")) == IndexPath(1, 1)
    assert loader.index_path_of(image_factory("nope.jpg")) is None
