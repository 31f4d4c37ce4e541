"""Hypothesis strategies for delivernext property-based testing.

Usage:
    from tests.strategies import reasonable_datetimes, month_amounts
    from tests.strategies.dates import datetime_by_boundary

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - month_amount_by_magnitude, datetime_by_boundary, quarter_start_datetimes
"""

from .dates import (
    datetime_by_boundary,
    fractional_amounts,
    month_amount_by_magnitude,
    month_amounts,
    month_end_datetimes,
    nonzero_month_amounts,
    quarter_amounts,
    quarter_start_datetimes,
    reasonable_datetimes,
    unsupported_date_inputs,
    year_amounts,
)

__all__ = [
    "datetime_by_boundary",
    "fractional_amounts",
    "month_amount_by_magnitude",
    "month_amounts",
    "month_end_datetimes",
    "nonzero_month_amounts",
    "quarter_amounts",
    "quarter_start_datetimes",
    "reasonable_datetimes",
    "unsupported_date_inputs",
    "year_amounts",
]
