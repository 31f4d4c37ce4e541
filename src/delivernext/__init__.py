"""delivernext - "next quarter" and "next year" labels on calendar-safe date math.

Public API:
    next_quarter_label - Quarter label ("Q1".."Q4") three months from a date
    next_year_label - Year label ("2021") twelve months from a date
    quarter_label, year_label - Labels of a date itself

Date arithmetic (also in delivernext.dates):
    to_date - Coerce datetime/date/millisecond timestamp to an aware datetime
    add_months, add_quarters, add_years - Clamp to the end of shorter months
    sub_months, sub_quarters, sub_years - Additive inverses
    end_of_month, days_in_month - Month-end helpers
    is_valid_date - TypeIs guard for arithmetic results
    INVALID_DATE - Sentinel produced by unsupported input (never raised)

Exceptions:
    ArgumentCountError - A function received fewer arguments than it requires

Deprecated:
    next_quarter, next_year - Use next_quarter_label, next_year_label

Example:
    >>> from datetime import datetime
    >>> from delivernext import next_quarter_label, next_year_label
    >>> next_quarter_label(datetime(2008, 12, 1))
    'Q1'
    >>> next_year_label(datetime(2008, 12, 1))
    '2009'
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core.errors import ArgumentCountError
from .dates import (
    INVALID_DATE,
    InvalidDate,
    add_months,
    add_quarters,
    add_years,
    days_in_month,
    end_of_month,
    is_valid_date,
    sub_months,
    sub_quarters,
    sub_years,
    to_date,
)
from .deprecation import deprecated_alias
from .labels import next_quarter_label, next_year_label, quarter_label, year_label

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("delivernext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

next_quarter = deprecated_alias(next_quarter_label, "next_quarter", removal_version="1.0.0")
next_year = deprecated_alias(next_year_label, "next_year", removal_version="1.0.0")

__all__ = [
    "INVALID_DATE",
    "ArgumentCountError",
    "InvalidDate",
    "__version__",
    "add_months",
    "add_quarters",
    "add_years",
    "days_in_month",
    "end_of_month",
    "is_valid_date",
    "next_quarter",
    "next_quarter_label",
    "next_year",
    "next_year_label",
    "quarter_label",
    "sub_months",
    "sub_quarters",
    "sub_years",
    "to_date",
    "year_label",
]
