"""CLI tests for the ``thermocmd scales`` command group."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from click.testing import CliRunner

from thermocmd.cli.main import cli
from thermocmd.errors import UnknownScaleError

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def _data(args: list[str]) -> Any:
    result = CliRunner().invoke(cli, ["--format", "json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)["data"]


class TestScalesList:
    def test_json(self) -> None:
        data = _data(["scales", "list"])
        assert len(data) == 8
        assert data[0] == {
            "id": "kelvin",
            "name": "Kelvin",
            "symbol": "K",
            "description": data[0]["description"],
        }

    def test_rich(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "rich", "scales", "list"])
        assert result.exit_code == 0
        assert "Temperature Scales" in result.output
        assert "Newton" in result.output


class TestScalesInfo:
    def test_by_id(self) -> None:
        data = _data(["scales", "info", "reaumur"])
        assert data["scale"] == "reaumur"
        assert data["symbol"] == "°Ré"
        assert data["inventor"].startswith("René")
        assert data["key_points"]

    def test_by_partial_name(self) -> None:
        assert _data(["scales", "info", "Ran"])["scale"] == "rankine"

    def test_unknown(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "json", "scales", "info", "planck"])
        assert result.exit_code == 1
        assert isinstance(result.exception, UnknownScaleError)

    def test_rich(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "rich", "scales", "info", "kelvin"])
        assert result.exit_code == 0
        assert "Lord Kelvin" in result.output


class TestScalesHistory:
    def test_json(self) -> None:
        data = _data(["scales", "history"])
        years = [ev["year"] for ev in data]
        assert "1742" in years

    def test_rich(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "rich", "scales", "history"])
        assert result.exit_code == 0
        assert "History" in result.output


class TestScalesReference:
    def test_default_celsius(self) -> None:
        rows = {r["name"]: r for r in _data(["scales", "reference"])}
        assert rows["Water boils"]["value"] == 100
        assert rows["Water boils"]["scale"] == "celsius"

    def test_other_scale(self) -> None:
        rows = {r["name"]: r for r in _data(["scales", "reference", "--scale", "fahrenheit"])}
        assert rows["Water boils"]["value"] == 212
        assert rows["Equal point"]["value"] == -40
        assert rows["Water freezes"]["formatted"] == "32.00 °F"

    def test_rich(self) -> None:
        result = CliRunner().invoke(
            cli, ["--format", "rich", "--decimals", "0", "scales", "reference", "-s", "kelvin"]
        )
        assert result.exit_code == 0
        assert "373 K" in result.output


class TestScalesCuriositiesAndAbout:
    def test_curiosities(self) -> None:
        data = _data(["scales", "curiosities"])
        assert any("−40" in item["text"] for item in data)

    def test_about_json(self) -> None:
        data = _data(["scales", "about"])
        assert data["intro"]["title"] == "Temperature scales"
        assert data["final_note"]["title"]

    def test_about_rich(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "rich", "scales", "about"])
        assert result.exit_code == 0
        assert "Temperature scales" in result.output


class TestCustomCatalog:
    def test_catalog_file_setting(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "temperatureScales": [],
                    "historicalEvents": [{"year": "2000", "event": "Custom"}],
                }
            ),
            encoding="utf-8",
        )
        monkeypatch.setenv("THERMO_CATALOG_FILE", str(path))
        data = _data(["scales", "history"])
        assert data == [{"year": "2000", "event": "Custom"}]
