"""Calendar-safe month, quarter, and year arithmetic.

add_months() is the only routine with overflow policy; quarters and years
reduce to it (3 and 12 months per unit).

Month-end policy:
    Adding months keeps the day-of-month when it exists in the target month
    and clamps it to the target month's last day otherwise:

        Jan 15 + 1 month = Feb 15
        Jan 31 + 1 month = Feb 28 (Feb 29 in leap years)

    Clamping is lossy, so subtracting the same amount does not always return
    the starting date: Jan 31 + 1 month - 1 month = Jan 28.

Time-of-day is preserved from the input. A result whose wall time falls in
a DST gap is moved forward across the gap.

Invalid input (INVALID_DATE, unsupported date types, NaN amounts) and
results outside years 1-9999 produce INVALID_DATE rather than raising.

Python 3.13+.
"""

import calendar
import logging
from datetime import datetime, tzinfo

from delivernext.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_QUARTER, MONTHS_PER_YEAR
from delivernext.core.arguments import requires_args, to_integer

from .coercion import localize, resolve_timezone, to_date
from .guards import is_valid_date
from .types import INVALID_DATE, CalendarDate

__all__ = [
    "add_months",
    "add_quarters",
    "add_years",
    "days_in_month",
    "end_of_month",
    "sub_months",
    "sub_quarters",
    "sub_years",
]

logger = logging.getLogger(__name__)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in `month` (1-12) of `year`.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
    """
    return calendar.monthrange(year, month)[1]


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) by `months`, carrying whole years in both directions."""
    absolute_month = year * MONTHS_PER_YEAR + (month - 1) + months
    target_year, target_index = divmod(absolute_month, MONTHS_PER_YEAR)
    return target_year, target_index + 1


@requires_args(2)
def add_months(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Add a number of months to a date, clamping to the end of shorter months.

    Args:
        date: Date-like value accepted by to_date()
        amount: Months to add; positive amounts round down, negative round up
        tz: Time zone for coercion and the result (default: host local zone)

    Returns:
        New aware datetime, the coerced date itself when the amount is zero,
        or INVALID_DATE

    Raises:
        ArgumentCountError: If fewer than two arguments are supplied

    Examples:
        >>> add_months(datetime(2014, 9, 1), 5, tz=UTC)
        datetime.datetime(2015, 2, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> add_months(datetime(2021, 1, 31), 1, tz=UTC)
        datetime.datetime(2021, 2, 28, 0, 0, tzinfo=datetime.timezone.utc)
    """
    start = to_date(date, tz=tz)
    months = to_integer(amount)

    if months is None:
        logger.debug("Month amount %r is not a number", amount)
        return INVALID_DATE

    # Zero is a no-op; rebuilding the wall time could shift it near a DST change
    if months == 0:
        return start

    if not is_valid_date(start):
        return INVALID_DATE

    zone = resolve_timezone(tz)
    # fold=1 would resolve a DST gap backward in the target month
    wall_time = start.replace(tzinfo=None, fold=0)
    day_of_month = wall_time.day

    target_year, target_month = _shift_month(wall_time.year, wall_time.month, months)
    if not MIN_YEAR <= target_year <= MAX_YEAR:
        logger.debug("Adding %d months to %s leaves the supported year range", months, start)
        return INVALID_DATE

    last_day = days_in_month(target_year, target_month)

    try:
        end_of_target_month = localize(
            wall_time.replace(year=target_year, month=target_month, day=last_day), zone
        )
        if day_of_month >= last_day:
            return end_of_target_month

        # Rebuild from the original wall time; the probe may have been moved by a DST gap
        return localize(
            wall_time.replace(year=target_year, month=target_month, day=day_of_month), zone
        )
    except OverflowError:
        logger.debug("Adding %d months to %s leaves the supported date range", months, start)
        return INVALID_DATE


@requires_args(2)
def add_quarters(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Add a number of quarters (3 months each) to a date.

    Examples:
        >>> add_quarters(datetime(2014, 9, 1), 1, tz=UTC)
        datetime.datetime(2014, 12, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    quarters = to_integer(amount)
    months = None if quarters is None else quarters * MONTHS_PER_QUARTER
    return add_months(date, months, tz=tz)


@requires_args(2)
def add_years(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Add a number of years (12 months each) to a date.

    Feb 29 plus one year clamps to Feb 28.

    Examples:
        >>> add_years(datetime(2014, 9, 1), 5, tz=UTC)
        datetime.datetime(2019, 9, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    years = to_integer(amount)
    months = None if years is None else years * MONTHS_PER_YEAR
    return add_months(date, months, tz=tz)


def _negate(amount: object) -> int | None:
    value = to_integer(amount)
    return None if value is None else -value


@requires_args(2)
def sub_months(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Subtract a number of months from a date (same clamping as add_months)."""
    return add_months(date, _negate(amount), tz=tz)


@requires_args(2)
def sub_quarters(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Subtract a number of quarters from a date."""
    return add_quarters(date, _negate(amount), tz=tz)


@requires_args(2)
def sub_years(date: object, amount: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Subtract a number of years from a date."""
    return add_years(date, _negate(amount), tz=tz)


@requires_args(1)
def end_of_month(date: object, *, tz: tzinfo | None = None) -> CalendarDate:
    """Return the last day of the date's month, keeping its time of day.

    This is the boundary add_months() clamps to.

    Examples:
        >>> end_of_month(datetime(2024, 2, 10, 9, 30), tz=UTC)
        datetime.datetime(2024, 2, 29, 9, 30, tzinfo=datetime.timezone.utc)
    """
    start = to_date(date, tz=tz)
    if not is_valid_date(start):
        return INVALID_DATE
    wall_time = start.replace(tzinfo=None, fold=0)
    last_day = days_in_month(wall_time.year, wall_time.month)
    try:
        return localize(wall_time.replace(day=last_day), resolve_timezone(tz))
    except OverflowError:
        return INVALID_DATE
