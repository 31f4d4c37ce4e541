"""Calendar date model.

A CalendarDate is either a timezone-aware datetime carrying local civil
fields, or the INVALID_DATE sentinel. The sentinel flows through arithmetic
instead of an exception so that callers can inspect it (see is_valid_date)
before formatting.

Python 3.13+.
"""

import math
from datetime import date, datetime
from typing import Final, final

from delivernext.constants import INVALID_DATE_TEXT

__all__ = ["INVALID_DATE", "CalendarDate", "DateInput", "InvalidDate"]


@final
class InvalidDate:
    """Sentinel for a date that could not be constructed.

    There is exactly one instance, INVALID_DATE. It is falsy, and its civil
    field reads return NaN, mirroring how a label formatter sees it.
    """

    __slots__ = ()

    _instance: "InvalidDate | None" = None

    def __new__(cls) -> "InvalidDate":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return f"<{INVALID_DATE_TEXT}>"

    def __str__(self) -> str:
        return INVALID_DATE_TEXT

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "INVALID_DATE"

    @property
    def year(self) -> float:
        return math.nan

    @property
    def month(self) -> float:
        return math.nan

    @property
    def day(self) -> float:
        return math.nan

    def timestamp(self) -> float:
        return math.nan


INVALID_DATE: Final = InvalidDate()

type CalendarDate = datetime | InvalidDate

# Accepted by to_date(); anything else coerces to INVALID_DATE.
# int/float values are milliseconds since the Unix epoch.
type DateInput = datetime | date | InvalidDate | int | float
