#!/usr/bin/env python3
"""Module: picdesk.__main__

Date: 2026-10-17

Command line entry point:
    python -m picdesk FOLDER [--multi-section] [--lengths 7,5,10]

Loads the images of FOLDER and logs how they are split into sections.
"""

import argparse
import logging
import sys

from picdesk.config import APP_NAME, APP_VERSION, REMAINDER_MODES, SECTION_REMAINDER_MODE
from picdesk.core.errors import SectionConfigurationError
from picdesk.core.image_directory_loader import ImageDirectoryLoader
from picdesk.utils.logging.logger_factory import get_cached_logger
from picdesk.utils.logging.logger_setup import ConfigureLogger

logger = get_cached_logger(__name__)


def parse_lengths(text: str) -> tuple[int, ...]:
    """Parse a comma separated list of section lengths ("7,5,10")."""
    try:
        lengths = tuple(int(part) for part in text.split(",") if part.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid section lengths {text!r}") from e
    if any(length < 0 for length in lengths):
        raise argparse.ArgumentTypeError("section lengths must not be negative")
    return lengths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME, description="Show how the images of a folder are split into sections"
    )
    parser.add_argument("folder", help="Folder to load images from")
    parser.add_argument(
        "--multi-section", action="store_true", help="Split images using the section lengths"
    )
    parser.add_argument(
        "--lengths", type=parse_lengths, help="Comma separated section lengths, e.g. 7,5,10"
    )
    parser.add_argument(
        "--remainder",
        choices=REMAINDER_MODES,
        default=SECTION_REMAINDER_MODE,
        help="What to do with images the section lengths don't cover",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    ConfigureLogger(console_level=logging.DEBUG if args.verbose else logging.INFO)

    loader = ImageDirectoryLoader()
    loader.single_section_mode = not args.multi_section
    loader.remainder_mode = args.remainder
    if args.lengths is not None:
        loader.section_lengths = args.lengths

    try:
        scanned = loader.load_from_directory(args.folder)
    except SectionConfigurationError as e:
        logger.error("Invalid section layout: %s", e)
        return 2

    if not scanned:
        return 1

    for index, section in enumerate(loader.sections()):
        logger.info(
            "Section %d: %d images (offset %d)", index, section.length, section.offset
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
