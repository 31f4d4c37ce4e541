"""Lazy access to Babel's time zone lookup.

Date coercion reads naive values in the host's local zone. Babel resolves
that zone (LOCALTZ, which follows the TZ environment variable on POSIX), so
every local-zone lookup goes through get_babel_dates() here. Callers that
pass an explicit tzinfo never touch Babel.

    zone = get_babel_dates().get_timezone()

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import tzinfo

__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "get_babel_dates",
    "is_babel_available",
    "require_babel",
]

_INSTALL_HINT = "pip install delivernext"


class BabelDatesProtocol(Protocol):
    """The part of babel.dates that date coercion calls."""

    def get_timezone(self, zone: str | tzinfo | None = None) -> tzinfo:
        """Look up a zone by name; None means the local zone."""
        ...  # pylint: disable=unnecessary-ellipsis


class BabelImportError(ImportError):
    """Babel is needed to resolve the local time zone but is not installed.

    Attributes:
        feature: Function that needed the local zone
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for local time zone resolution. "
            f"Install with: {_INSTALL_HINT}"
        )
        self.feature = feature


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel.dates  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


def is_babel_available() -> bool:
    """True when babel.dates can be imported."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming `feature` when Babel is missing."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_dates() -> BabelDatesProtocol:
    """Import and return babel.dates.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
