"""Module: section_policy.py

Date: 2026-10-17

Section assignment policy.

Given the number of loaded images and a SectionLayout (single-section flag
plus the table of desired section lengths), decides how many sections exist
and where each one starts.

Multi-section rules:
- Fewer than 2 configured lengths, or everything fits in the first one:
  a single section holding all images.
- Otherwise section 0 gets lengths[0] images, every following section gets
  its configured length, and the first section that reaches the end of the
  list is clamped to what is left and closes the table.
- If the configured lengths run out before the images do, the remainder is
  either added to the last section ("extend") or rejected ("strict").
"""

from dataclasses import dataclass

from picdesk.config import (
    DEFAULT_SECTION_LENGTHS,
    DEFAULT_SINGLE_SECTION_MODE,
    REMAINDER_MODES,
    REMAINDER_STRICT,
    SECTION_REMAINDER_MODE,
)
from picdesk.core.errors import SectionConfigurationError
from picdesk.models.section import Section
from picdesk.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class SectionLayout:
    """Immutable snapshot of the layout configuration, taken at load time."""

    single_section: bool = DEFAULT_SINGLE_SECTION_MODE
    section_lengths: tuple[int, ...] = DEFAULT_SECTION_LENGTHS
    remainder: str = SECTION_REMAINDER_MODE

    def __post_init__(self):
        lengths = tuple(self.section_lengths)
        for length in lengths:
            if isinstance(length, bool) or not isinstance(length, int) or length < 0:
                raise SectionConfigurationError(
                    f"Section lengths must be non-negative integers, got {length!r}"
                )
        if self.remainder not in REMAINDER_MODES:
            raise SectionConfigurationError(
                f"Unknown remainder mode {self.remainder!r}, expected one of {REMAINDER_MODES}"
            )
        object.__setattr__(self, "section_lengths", lengths)


def assign_sections(item_count: int, layout: SectionLayout) -> list[Section]:
    """Compute the section descriptors for ``item_count`` images.

    Args:
        item_count: Number of images in the list
        layout: Layout configuration snapshot

    Returns:
        Section descriptors partitioning ``[0, item_count)``

    Raises:
        SectionConfigurationError: In strict mode, if the configured lengths
            cover fewer than ``item_count`` images.
    """
    lengths = layout.section_lengths

    if layout.single_section or len(lengths) < 2 or item_count <= lengths[0]:
        return [Section(0, item_count)]

    sections = [Section(0, lengths[0])]
    for length in lengths[1:]:
        offset = sections[-1].end
        if offset + length >= item_count:
            # last section for this collection
            sections.append(Section(offset, item_count - offset))
            return sections
        sections.append(Section(offset, length))

    covered = sections[-1].end
    if layout.remainder == REMAINDER_STRICT:
        raise SectionConfigurationError(
            f"Section lengths cover {covered} of {item_count} images"
        )

    logger.debug(
        "[SectionPolicy] Lengths cover %d of %d images, extending last section",
        covered,
        item_count,
        extra={"dev_only": True},
    )
    last = sections[-1]
    sections[-1] = Section(last.offset, item_count - last.offset)
    return sections
