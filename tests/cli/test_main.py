"""Tests for the ``main()`` entry point and its error reporting."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from thermocmd.cli.main import cli, main


class TestMain:
    def test_success_returns_normally(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--format", "json", "convert", "100"])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["data"]["result"] == 212

    def test_invalid_temperature_reported_as_json(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "json", "convert", "warm"])
        assert exc_info.value.code == 1

        parsed = json.loads(capsys.readouterr().out)
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "invalid_temperature"
        assert "warm" in parsed["error"]["message"]

    def test_unknown_scale_reported_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["scales", "info", "planck"])
        assert exc_info.value.code == 1

        parsed = json.loads(capsys.readouterr().out)
        assert parsed["error"]["code"] == "unknown_scale"

    def test_catalog_error_reported(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("THERMO_CATALOG_FILE", "/nonexistent/catalog.json")
        with pytest.raises(SystemExit):
            main(["scales", "history"])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["error"]["code"] == "catalog_error"

    def test_usage_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "1", "--to", "planck"])
        assert exc_info.value.code == 2
        assert "planck" in capsys.readouterr().err

    def test_help_returns_normally(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--help"])
        assert "convert" in capsys.readouterr().out


class TestCliGroup:
    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("convert", "table", "scales", "interactive"):
            assert name in result.output

    def test_verbose_flag_accepted(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "--format", "json", "convert", "1"])
        assert result.exit_code == 0
