"""Tests for the packaging and pytest configuration in pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.fixture(scope="module")
def pyproject() -> dict:
    """Return the parsed pyproject.toml."""

    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)


def test_speed_markers_are_registered(pyproject: dict, request: pytest.FixtureRequest) -> None:
    """The two markers the collection hook enforces are declared and active."""

    declared = pyproject["tool"]["pytest"]["ini_options"]["markers"]
    assert sorted(entry.split(":", 1)[0] for entry in declared) == ["integration", "unit"]

    active = {entry.split(":", 1)[0] for entry in request.config.getini("markers")}
    assert {"unit", "integration"} <= active


def test_runtime_dependencies_cover_third_party_imports(pyproject: dict) -> None:
    """JSON logging and the YAML loader are declared runtime dependencies."""

    names = {requirement.split(">=", 1)[0].strip().lower() for requirement in pyproject["project"]["dependencies"]}
    assert {"python-json-logger", "pyyaml"} <= names
    test_extra = pyproject["project"]["optional-dependencies"]["test"]
    assert any(requirement.startswith("pytest") for requirement in test_extra)
