"""Shared constants for delivernext.

Constants are grouped by domain:
- Calendar units: Month multipliers for quarter and year arithmetic
- Date range: Bounds of representable civil dates
- Label text: Fragments used when rendering period labels

Python 3.13+. Zero external dependencies.
"""

from datetime import UTC, datetime

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar units
    "MONTHS_PER_QUARTER",
    "MONTHS_PER_YEAR",
    # Date range
    "MIN_YEAR",
    "MAX_YEAR",
    "EPOCH",
    # Label text
    "QUARTER_PREFIX",
    "NAN_TEXT",
    "INVALID_DATE_TEXT",
]

# ============================================================================
# CALENDAR UNITS
# ============================================================================

# Quarters and years are expressed in months so that all arithmetic reduces
# to a single month-addition routine with one overflow policy.
MONTHS_PER_QUARTER: int = 3
MONTHS_PER_YEAR: int = 12

# ============================================================================
# DATE RANGE
# ============================================================================

# datetime.MINYEAR / datetime.MAXYEAR. Results outside this range become
# the invalid-date sentinel instead of raising OverflowError.
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Origin for millisecond timestamps.
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=UTC)

# ============================================================================
# LABEL TEXT
# ============================================================================

QUARTER_PREFIX: str = "Q"

# Rendered in place of a number when the underlying date is invalid,
# e.g. "QNaN" for a quarter label and "NaN" for a year label.
NAN_TEXT: str = "NaN"

INVALID_DATE_TEXT: str = "Invalid Date"
