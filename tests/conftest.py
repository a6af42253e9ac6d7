"""Pytest fixtures shared across the chartconfig test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chartconfig.datasets import RadarDataset


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear CHARTCONFIG_* variables so defaults apply unless a test sets them."""

    for name in ("CHARTCONFIG_COLOR_FORMAT", "CHARTCONFIG_LOG_FORMAT", "CHARTCONFIG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def radar() -> RadarDataset:
    """Return a freshly constructed, all-default RadarDataset."""

    return RadarDataset()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no environment or filesystem access.
    - `integration`: tests touching environment variables, logging handlers,
      scripts, or files.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
