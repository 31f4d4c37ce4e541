"""Type guard for calendar arithmetic results.

Arithmetic functions return CalendarDate (datetime | InvalidDate).
is_valid_date() narrows the union for mypy without checking types by hand.

Example:
    >>> from delivernext.dates import add_months, is_valid_date
    >>> result = add_months(datetime(2024, 1, 31), 1)
    >>> if is_valid_date(result):
    ...     # mypy knows result is datetime
    ...     month = result.month
"""

from datetime import datetime
from typing import TypeIs

from .types import CalendarDate

__all__ = ["is_valid_date"]


def is_valid_date(value: CalendarDate | None) -> TypeIs[datetime]:
    """Type guard: Check if a calendar result is a real date.

    Returns False for INVALID_DATE and None.

    Args:
        value: Result of to_date() or one of the add_*/sub_* functions

    Returns:
        True if value is a datetime, False otherwise
    """
    return isinstance(value, datetime)
