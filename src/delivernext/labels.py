"""Period labels: "next quarter" and "next year".

Labels are rendered from calendar arithmetic results:

    next_quarter_label(datetime(2020, 2, 1))  -> "Q2"
    next_quarter_label(datetime(2008, 12, 1)) -> "Q1"   (wraps into next year)
    next_year_label(datetime(2020, 2, 1))     -> "2021"

Invalid input never raises. The quarter label renders as "QNaN" and the
year label as "NaN", matching what a caller sees when reading the fields of
INVALID_DATE.

Years are rendered with their natural digit count; years below 1000 are
not zero-padded.

Python 3.13+.
"""

import math
import time
from datetime import tzinfo
from typing import Literal

from .constants import MONTHS_PER_QUARTER, NAN_TEXT, QUARTER_PREFIX
from .dates import add_quarters, add_years, is_valid_date, to_date
from .enums import DateDefault

__all__ = [
    "next_quarter_label",
    "next_year_label",
    "quarter_label",
    "year_label",
]

_NANOSECONDS_PER_MILLISECOND = 1_000_000


def _current_timestamp() -> int:
    """System clock as milliseconds since the Unix epoch."""
    return time.time_ns() // _NANOSECONDS_PER_MILLISECOND


def _resolve_default(from_when: object) -> object:
    if from_when is DateDefault.NOW:
        return _current_timestamp()
    return from_when


def quarter_label(date: object, *, tz: tzinfo | None = None) -> str:
    """Render the calendar quarter of `date` as "Q1".."Q4".

    Args:
        date: Date-like value accepted by to_date()
        tz: Time zone the quarter is read in (default: host local zone)

    Returns:
        "Q1".."Q4", or "QNaN" for invalid input
    """
    value = to_date(date, tz=tz)
    if not is_valid_date(value):
        return QUARTER_PREFIX + NAN_TEXT
    return f"{QUARTER_PREFIX}{math.ceil(value.month / MONTHS_PER_QUARTER)}"


def year_label(date: object, *, tz: tzinfo | None = None) -> str:
    """Render the calendar year of `date` as a plain integer string.

    Returns:
        e.g. "2021", or "NaN" for invalid input
    """
    value = to_date(date, tz=tz)
    if not is_valid_date(value):
        return NAN_TEXT
    return str(value.year)


def next_quarter_label(
    from_when: object | Literal[DateDefault.NOW] = DateDefault.NOW,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Label of the quarter three months after `from_when`.

    Args:
        from_when: Date-like value or millisecond timestamp (default: now)
        tz: Time zone for the arithmetic (default: host local zone)

    Returns:
        "Q1".."Q4", or "QNaN" for invalid input

    Examples:
        >>> next_quarter_label(datetime(2020, 2, 1))
        'Q2'
        >>> next_quarter_label("2020-02-01")
        'QNaN'
    """
    return quarter_label(add_quarters(_resolve_default(from_when), 1, tz=tz), tz=tz)


def next_year_label(
    from_when: object | Literal[DateDefault.NOW] = DateDefault.NOW,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Label of the year twelve months after `from_when`.

    Args:
        from_when: Date-like value or millisecond timestamp (default: now)
        tz: Time zone for the arithmetic (default: host local zone)

    Returns:
        Year string such as "2021", or "NaN" for invalid input

    Examples:
        >>> next_year_label(datetime(2008, 12, 1))
        '2009'
    """
    return year_label(add_years(_resolve_default(from_when), 1, tz=tz), tz=tz)
