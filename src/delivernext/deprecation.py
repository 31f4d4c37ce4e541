"""Deprecation warnings for legacy delivernext names.

next_quarter and next_year predate the *_label names. They stay callable
until their removal version and warn on every call.
"""

import functools
import warnings
from collections.abc import Callable
from typing import ParamSpec, TypeVar

__all__ = ["deprecated_alias", "warn_deprecated"]

P = ParamSpec("P")
R = TypeVar("R")


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Emit DeprecationWarning: "<feature> is deprecated and will be removed in
    version <removal_version>. Use <alternative> instead."

    `stacklevel` is passed to warnings.warn(); the default attributes the
    warning to the caller of the function that calls this.
    """
    message = f"{feature} is deprecated and will be removed in version {removal_version}."
    if alternative:
        message += f" Use {alternative} instead."

    warnings.warn(message, DeprecationWarning, stacklevel=stacklevel)


def deprecated_alias(
    func: Callable[P, R],
    name: str,
    *,
    removal_version: str,
) -> Callable[P, R]:
    """Create a deprecated alias of `func` published under `name`.

    Each call emits DeprecationWarning naming `func` as the replacement,
    then delegates to `func` unchanged.

    Args:
        func: Current implementation
        name: Legacy name the alias is exported as
        removal_version: Version when the alias will be removed

    Returns:
        Wrapper with the legacy name and a deprecation note in its docstring

    Example:
        >>> next_quarter = deprecated_alias(
        ...     next_quarter_label, "next_quarter", removal_version="1.0.0"
        ... )
        >>> next_quarter(datetime(2020, 2, 1))  # Issues DeprecationWarning
        'Q2'
    """
    alternative = f"{func.__name__}()"

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        warn_deprecated(
            f"{name}()",
            removal_version=removal_version,
            alternative=alternative,
            stacklevel=3,
        )
        return func(*args, **kwargs)

    wrapper.__name__ = name
    wrapper.__qualname__ = name
    wrapper.__doc__ = (
        f"Deprecated alias of {alternative}.\n\n"
        f".. deprecated::\n"
        f"    Will be removed in version {removal_version}.\n"
        f"    Use :func:`{func.__name__}` instead."
    )
    return wrapper
