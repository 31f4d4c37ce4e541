"""Argument contracts and numeric amount coercion.

requires_args() enforces a minimum positional argument count with a
consistent ArgumentCountError. to_integer() turns a loosely typed amount
into an int, or None when the amount is not a number.

Python 3.13+.
"""

import functools
import inspect
import math
from collections.abc import Callable
from decimal import Decimal
from typing import ParamSpec, TypeVar

from .errors import ArgumentCountError

__all__ = ["requires_args", "to_integer"]

P = ParamSpec("P")
R = TypeVar("R")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def requires_args(count: int) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator requiring at least `count` of the function's positional parameters.

    Positional parameters may be supplied by position or by keyword.
    Keyword-only options (such as ``tz``) never count toward the contract.

    Args:
        count: Minimum number of positional parameters the caller must supply

    Returns:
        Decorator function

    Example:
        >>> @requires_args(2)
        ... def add(a: int, b: int) -> int:
        ...     return a + b
        >>> add(1)
        Traceback (most recent call last):
        ...
        ArgumentCountError: 2 arguments required, but only 1 present
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        positional_names = frozenset(
            name
            for name, param in inspect.signature(func).parameters.items()
            if param.kind in _POSITIONAL_KINDS
        )

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            present = len(args) + sum(1 for name in kwargs if name in positional_names)
            if present < count:
                raise ArgumentCountError(count, present)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def to_integer(value: object) -> int | None:
    """Coerce an amount to an integer, rounding toward zero.

    Positive amounts round down and negative amounts round up, so 2.9 -> 2
    and -2.9 -> -2. Numeric strings are converted first; a blank string
    counts as zero.

    Args:
        value: int, float, Decimal, or numeric string

    Returns:
        Integer amount, or None when the value is not a finite number
        (None, bool, NaN, infinity, unparseable strings, other types)

    Examples:
        >>> to_integer(3.7)
        3
        >>> to_integer(-3.7)
        -3
        >>> to_integer(" 12 ")
        12
        >>> to_integer(True) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    number: float | Decimal
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, float | Decimal):
        number = value
    else:
        return None

    try:
        return math.trunc(number)
    except (OverflowError, ValueError):
        # NaN raises ValueError, infinity raises OverflowError
        return None
