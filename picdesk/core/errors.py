"""Module: errors.py

Date: 2026-10-17

Exceptions raised by the section index.

Out-of-range lookups derive from IndexError and configuration problems from
ValueError, so callers can catch either the picdesk type or the builtin one.
"""


class PicdeskError(Exception):
    """Base class for picdesk errors."""


class SectionIndexError(PicdeskError, IndexError):
    """Raised when a section index, index path or position is out of range."""


class SectionConfigurationError(PicdeskError, ValueError):
    """Raised when the section length table can't produce a valid layout."""


class SectionInvariantError(PicdeskError, AssertionError):
    """Raised when section offsets no longer partition the image list."""
