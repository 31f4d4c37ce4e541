"""Calendar date coercion and month-based arithmetic.

All functions are pure and thread-safe. Unsupported input never raises;
it produces INVALID_DATE, which is_valid_date() detects.

Public API:
    Coercion:
        to_date - Date-like value or millisecond timestamp -> CalendarDate

    Arithmetic:
        add_months, add_quarters, add_years - Clamp to end of shorter months
        sub_months, sub_quarters, sub_years - Additive inverses
        end_of_month - Last day of a date's month
        days_in_month - Day count of a (year, month)

    Model:
        CalendarDate - datetime | InvalidDate
        INVALID_DATE - The invalid-date sentinel
        is_valid_date - TypeIs guard narrowing CalendarDate to datetime

Python 3.13+. Uses Babel to resolve the local time zone.
"""

from .arithmetic import (
    add_months,
    add_quarters,
    add_years,
    days_in_month,
    end_of_month,
    sub_months,
    sub_quarters,
    sub_years,
)
from .coercion import to_date
from .guards import is_valid_date
from .types import INVALID_DATE, CalendarDate, DateInput, InvalidDate

__all__ = [
    "INVALID_DATE",
    "CalendarDate",
    "DateInput",
    "InvalidDate",
    "add_months",
    "add_quarters",
    "add_years",
    "days_in_month",
    "end_of_month",
    "is_valid_date",
    "sub_months",
    "sub_quarters",
    "sub_years",
    "to_date",
]
