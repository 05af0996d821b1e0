"""Module: picdesk.config.sections

Date: 2026-10-17

Section layout defaults used by ImageDirectoryLoader.

DEFAULT_SECTION_LENGTHS[0] is 7, i.e. the first 7 images go into section 0,
DEFAULT_SECTION_LENGTHS[1] is 5, i.e. the next 5 images go into section 1,
and so on. The values are demo data, not derived from content.
"""

# =====================================
# SECTION LAYOUT
# =====================================

DEFAULT_SINGLE_SECTION_MODE = True

DEFAULT_SECTION_LENGTHS = (7, 5, 10, 2, 11, 7, 10, 12, 20, 25, 10, 3, 30, 25, 40)

# What to do with items left over when the lengths above sum to less than
# the number of loaded items:
#   "extend" - the last section absorbs the remainder
#   "strict" - loading raises SectionConfigurationError
REMAINDER_EXTEND = "extend"
REMAINDER_STRICT = "strict"
REMAINDER_MODES = (REMAINDER_EXTEND, REMAINDER_STRICT)

SECTION_REMAINDER_MODE = REMAINDER_EXTEND
