"""Tests for babel_compat module - centralized Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking.
"""

from datetime import UTC, tzinfo

import pytest

from delivernext.core import babel_compat
from delivernext.core.babel_compat import (
    BabelImportError,
    get_babel_dates,
    is_babel_available,
    require_babel,
)
from delivernext.dates import to_date


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_returns_bool(self) -> None:
        """is_babel_available returns a boolean."""
        assert isinstance(is_babel_available(), bool)

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is a runtime dependency and must be installed."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise_when_available(self) -> None:
        """require_babel does not raise when Babel is installed."""
        require_babel("test_function")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature(self) -> None:
        """Error message includes the feature name."""
        assert "to_date" in str(BabelImportError("to_date"))

    def test_message_includes_install_instructions(self) -> None:
        """Error message includes installation instructions."""
        assert "pip install delivernext" in str(BabelImportError("to_date"))

    def test_stores_feature_attribute(self) -> None:
        """Error stores feature name as attribute."""
        assert BabelImportError("my_feature").feature == "my_feature"

    def test_is_import_error(self) -> None:
        """BabelImportError is a subclass of ImportError."""
        assert isinstance(BabelImportError("test"), ImportError)


class TestGetBabelDates:
    """Test get_babel_dates function."""

    def test_returns_module_with_get_timezone(self) -> None:
        """get_babel_dates returns babel.dates."""
        dates = get_babel_dates()
        assert hasattr(dates, "get_timezone")

    def test_local_timezone_is_tzinfo(self) -> None:
        """get_timezone() without arguments yields the local tzinfo."""
        assert isinstance(get_babel_dates().get_timezone(), tzinfo)


class TestMissingBabel:
    """Behavior when Babel cannot be imported."""

    def test_require_babel_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """require_babel raises BabelImportError when Babel is missing."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError, match="get_babel_dates requires Babel"):
            get_babel_dates()

    def test_coercion_surfaces_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Local zone resolution surfaces the missing dependency."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError):
            to_date(0)

    def test_explicit_zone_needs_no_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit tz bypasses local zone resolution."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        assert to_date(0, tz=UTC).year == 1970
