from __future__ import annotations

import json
from io import StringIO

import pytest

from thermocmd.conversion.converter import scale_readings
from thermocmd.models.conversion import ConversionResult
from thermocmd.models.reference import CatalogAbout, HistoricalEvent, IntroText
from thermocmd.models.scale import TemperatureScale
from thermocmd.output.formatter import OutputFormatter, detect_format


class _TTY(StringIO):
    def isatty(self) -> bool:
        return True


def _rich() -> tuple[OutputFormatter, _TTY]:
    buf = _TTY()
    return OutputFormatter(stream=buf, force_format="rich"), buf


class TestFormatSelection:
    def test_non_tty_defaults_to_json(self) -> None:
        assert OutputFormatter(stream=StringIO()).format == "json"

    def test_tty_defaults_to_rich(self) -> None:
        assert OutputFormatter(stream=_TTY()).format == "rich"

    def test_forced_format_wins(self) -> None:
        assert OutputFormatter(stream=_TTY(), force_format="json").format == "json"
        assert OutputFormatter(stream=StringIO(), force_format="quiet").format == "quiet"

    def test_stream_without_isatty_is_json(self) -> None:
        assert detect_format(object()) == "json"


class TestJsonEmit:
    def test_output_goes_to_stream(self) -> None:
        buf = StringIO()
        OutputFormatter(stream=buf).output({"a": 1}, command="test")
        parsed = json.loads(buf.getvalue())
        assert parsed["data"] == {"a": 1}

    def test_error_goes_to_stream(self) -> None:
        buf = StringIO()
        OutputFormatter(stream=buf).output_error(code="x", message="boom", command="test")
        parsed = json.loads(buf.getvalue())
        assert parsed["ok"] is False
        assert parsed["error"]["message"] == "boom"

    def test_readings_are_serialised_not_rendered(self) -> None:
        buf = StringIO()
        readings = scale_readings(0, TemperatureScale.CELSIUS)
        OutputFormatter(stream=buf).output(readings, command="table", title="ignored")
        parsed = json.loads(buf.getvalue())
        assert parsed["data"][0]["scale"] == "kelvin"
        assert "ignored" not in buf.getvalue()


class TestRichDispatch:
    def test_conversion_uses_precision_for_source(self) -> None:
        formatter, buf = _rich()
        result = ConversionResult(
            value=0,
            from_scale=TemperatureScale.CELSIUS,
            to_scale=TemperatureScale.KELVIN,
            result=273.15,
            formatted="273 K",
        )
        formatter.output(result, command="convert", decimals=0)
        output = buf.getvalue()

        assert "0 °C" in output
        assert "273 K" in output

    def test_readings_render_as_table_with_title(self) -> None:
        formatter, buf = _rich()
        readings = scale_readings(100, TemperatureScale.CELSIUS)
        formatter.output(readings, command="table", title="100.00 °C in all scales")
        output = buf.getvalue()

        assert "100.00 °C in all scales" in output
        assert "212.00 °F" in output
        assert "Delisle" in output

    def test_history_list(self) -> None:
        formatter, buf = _rich()
        formatter.output([HistoricalEvent(year="1724", event="Fahrenheit")], command="h")
        assert "1724" in buf.getvalue()

    def test_about(self) -> None:
        formatter, buf = _rich()
        formatter.output(CatalogAbout(intro=IntroText(title="Scales")), command="about")
        assert "Scales" in buf.getvalue()

    def test_plain_text(self) -> None:
        formatter, buf = _rich()
        formatter.output("plain text", command="test")
        assert "plain text" in buf.getvalue()

    def test_empty_list(self) -> None:
        formatter, buf = _rich()
        formatter.output([], command="scales.history")
        assert "Nothing to show" in buf.getvalue()

    def test_unrenderable_payload(self) -> None:
        formatter, _ = _rich()
        with pytest.raises(TypeError, match="dict"):
            formatter.output({"a": 1}, command="test")
