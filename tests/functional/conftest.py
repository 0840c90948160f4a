"""Default marks and shared helpers for tests under `tests/functional/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if FUNCTIONAL_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


@pytest.fixture(autouse=True)
def _isolated_currency_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every functional test without COSTCALC_* currency overrides."""
    for name in (
        "COSTCALC_CURRENCY_SYMBOL",
        "COSTCALC_CURRENCY_SEPARATOR",
        "COSTCALC_GROUPING_SEPARATOR",
        "COSTCALC_DECIMAL_SEPARATOR",
        "COSTCALC_DECIMAL_PLACES",
        "COSTCALC_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
