"""Date coercion: normalize loosely typed input into a CalendarDate.

Every date accepted by the arithmetic and label functions passes through
to_date() first. The result is always a timezone-aware datetime in the
target zone, or INVALID_DATE.

Coercion rules:
    - Aware datetime: same instant, converted to the target zone
    - Naive datetime: civil fields read as wall time in the target zone
    - date: midnight of that day in the target zone
    - int/float: milliseconds since the Unix epoch
    - InvalidDate: passed through
    - Anything else (str, None, bool, ...): INVALID_DATE, never raises

Strings are never parsed. Parse them explicitly (datetime.fromisoformat)
and pass the resulting datetime.

Thread-safe. Uses Babel for local time zone resolution.

Python 3.13+.
"""

import logging
import math
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from delivernext.constants import EPOCH
from delivernext.core.arguments import requires_args
from delivernext.core.babel_compat import get_babel_dates

from .types import INVALID_DATE, CalendarDate, InvalidDate

__all__ = ["from_timestamp", "localize", "resolve_timezone", "to_date"]

logger = logging.getLogger(__name__)


def resolve_timezone(tz: tzinfo | None = None) -> tzinfo:
    """Return `tz`, or the host's local time zone when `tz` is None.

    The local zone comes from babel.dates.get_timezone(), which honours the
    TZ environment variable and the system configuration.
    """
    if tz is not None:
        return tz
    return get_babel_dates().get_timezone()


def localize(wall_time: datetime, tz: tzinfo) -> datetime:
    """Attach `tz` to a naive wall time.

    Wall times that do not exist in `tz` (inside a DST gap) are moved forward
    across the gap. Works with both zoneinfo-style and pytz-style zones.

    Raises:
        OverflowError: If the normalized instant falls outside the datetime range
    """
    pytz_localize = getattr(tz, "localize", None)
    if pytz_localize is not None:
        return tz.normalize(pytz_localize(wall_time))  # type: ignore[attr-defined]
    return wall_time.replace(tzinfo=tz).astimezone(UTC).astimezone(tz)


def from_timestamp(milliseconds: int | float, tz: tzinfo) -> CalendarDate:
    """Convert milliseconds since the Unix epoch to a datetime in `tz`.

    Fractional milliseconds are truncated toward zero. Returns INVALID_DATE
    for NaN, infinity, and timestamps outside the datetime range.
    """
    if not math.isfinite(milliseconds):
        logger.debug("Non-finite timestamp %r coerced to invalid date", milliseconds)
        return INVALID_DATE
    try:
        return (EPOCH + timedelta(milliseconds=math.trunc(milliseconds))).astimezone(tz)
    except OverflowError:
        logger.debug("Timestamp %r is outside the supported date range", milliseconds)
        return INVALID_DATE


@requires_args(1)
def to_date(argument: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Coerce a date-like value or millisecond timestamp to a CalendarDate.

    Args:
        argument: datetime, date, InvalidDate, or int/float milliseconds
        tz: Target time zone (default: host local zone)

    Returns:
        Aware datetime in the target zone, or INVALID_DATE for unsupported input

    Raises:
        ArgumentCountError: If called without an argument

    Examples:
        >>> to_date(datetime(2014, 2, 11, 11, 30, 30), tz=UTC)
        datetime.datetime(2014, 2, 11, 11, 30, 30, tzinfo=datetime.timezone.utc)
        >>> to_date(1392118230000, tz=UTC)
        datetime.datetime(2014, 2, 11, 11, 30, 30, tzinfo=datetime.timezone.utc)
        >>> to_date("2014-02-11")
        <Invalid Date>
    """
    if isinstance(argument, InvalidDate):
        return argument

    if isinstance(argument, str):
        logger.warning(
            "String date arguments are not supported (got %r). "
            "Parse the string with datetime.fromisoformat() first.",
            argument,
        )
        return INVALID_DATE

    # bool is an int subclass and must not be read as a timestamp
    if isinstance(argument, bool) or not isinstance(argument, datetime | date | int | float):
        return INVALID_DATE

    zone = resolve_timezone(tz)

    if isinstance(argument, int | float):
        return from_timestamp(argument, zone)

    try:
        if isinstance(argument, datetime):
            if argument.utcoffset() is not None:
                return argument.astimezone(zone)
            return localize(argument, zone)
        return localize(datetime.combine(argument, time()), zone)
    except OverflowError:
        logger.debug("Date %r cannot be represented in %s", argument, zone)
        return INVALID_DATE
