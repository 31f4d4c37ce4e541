"""Enumerations for delivernext.

Python 3.13+.
"""

from enum import Enum


class DateDefault(Enum):
    """Default markers for optional date arguments.

    An omitted date argument is distinct from an explicit None: omission
    means "now", while None is unsupported input like any other.
    """

    NOW = "now"
    """Read the system clock at call time."""


__all__ = ["DateDefault"]
