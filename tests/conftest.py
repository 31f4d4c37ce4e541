"""Pytest configuration for the delivernext test suite.

Hypothesis profiles:
- dev: 500 examples, the local default
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE=<name> overrides the detection.

Property tests marked @pytest.mark.fuzz only run with: pytest -m fuzz
"""

import os
from datetime import UTC, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _detect_profile() -> str:
    """Pick the Hypothesis profile: explicit env override, then CI, then dev."""
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# TIME ZONE FIXTURES
# =============================================================================


@pytest.fixture
def utc() -> tzinfo:
    """UTC, for tests that must not depend on the host's local zone."""
    return UTC


@pytest.fixture
def fixed_minus_five() -> tzinfo:
    """Fixed UTC-05:00 offset without DST."""
    return timezone(timedelta(hours=-5))


@pytest.fixture
def new_york() -> tzinfo:
    """America/New_York, with DST transitions (2021-03-14 and 2021-11-07)."""
    return ZoneInfo("America/New_York")


@pytest.fixture
def berlin() -> tzinfo:
    """Europe/Berlin, with DST transitions (2021-10-31 and 2024-03-31)."""
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def pytz_new_york() -> tzinfo:
    """America/New_York as a pytz zone, the type Babel returns when pytz is installed."""
    pytz = pytest.importorskip("pytz")
    return pytz.timezone("America/New_York")  # type: ignore[no-any-return]


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, skipped unless selected with -m fuzz",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the -m expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
