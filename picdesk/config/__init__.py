"""Module: picdesk.config

Date: 2026-10-17

Configuration package for picdesk.

This package organizes configuration into logical modules:
- app: Application info, logging
- paths: Image extensions, thumbnail and log locations
- sections: Section layout defaults

All settings are re-exported from this module:
    from picdesk.config import DEFAULT_SECTION_LENGTHS
"""

from picdesk.config.app import *  # noqa: F401, F403
from picdesk.config.paths import *  # noqa: F401, F403
from picdesk.config.sections import *  # noqa: F401, F403
