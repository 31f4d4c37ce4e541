"""Core utilities shared across the date and label layers.

Exports:
    ArgumentCountError: Exception raised when too few arguments are supplied
    requires_args: Decorator enforcing a minimum argument count
    to_integer: Amount coercion (round toward zero, None for not-a-number)

Python 3.13+.
"""

from .arguments import requires_args, to_integer
from .errors import ArgumentCountError

__all__ = ["ArgumentCountError", "requires_args", "to_integer"]
