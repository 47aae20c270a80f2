"""Shared fixtures for the thermocmd test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

_SETTINGS_ENV = (
    "THERMO_FROM_SCALE",
    "THERMO_TO_SCALE",
    "THERMO_DECIMALS",
    "THERMO_OUTPUT_FORMAT",
    "THERMO_CATALOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer THERMO_* variables and .env files out of the tests."""
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
