from __future__ import annotations

import json

from thermocmd.models.conversion import ConversionResult, ScaleReading, SessionState
from thermocmd.models.reference import IntroText
from thermocmd.models.scale import SCALES, TemperatureScale
from thermocmd.output.json_output import format_json_error, format_json_response


class TestFormatJsonResponse:
    """Tests for :func:`format_json_response`."""

    def test_with_model(self) -> None:
        result = ConversionResult(
            value=100,
            from_scale=TemperatureScale.CELSIUS,
            to_scale=TemperatureScale.FAHRENHEIT,
            result=212,
            formatted="212.00 °F",
        )
        raw = format_json_response(data=result, command="convert")
        parsed = json.loads(raw)

        assert parsed["ok"] is True
        assert parsed["command"] == "convert"
        assert parsed["data"]["from_scale"] == "celsius"
        assert parsed["data"]["to_scale"] == "fahrenheit"
        assert parsed["data"]["result"] == 212
        assert parsed["data"]["formatted"] == "212.00 °F"
        assert "timestamp" in parsed

    def test_symbols_are_not_escaped(self) -> None:
        raw = format_json_response(data={"symbol": "°Rø"}, command="scales.list")
        assert "°Rø" in raw

    def test_with_list_of_models(self) -> None:
        readings = [
            ScaleReading(scale=TemperatureScale.KELVIN, symbol="K", value=273.15, formatted="x"),
            ScaleReading(scale=TemperatureScale.NEWTON, symbol="°N", value=0, formatted="y"),
        ]
        parsed = json.loads(format_json_response(data=readings, command="table"))

        assert isinstance(parsed["data"], list)
        assert parsed["data"][0]["scale"] == "kelvin"
        assert parsed["data"][1]["symbol"] == "°N"

    def test_dict_with_models_and_enums(self) -> None:
        data = {
            "scale": TemperatureScale.DELISLE,
            "intro": IntroText(title="Scales"),
            "note": None,
        }
        parsed = json.loads(format_json_response(data=data, command="scales.about"))

        assert parsed["data"]["scale"] == "delisle"
        assert parsed["data"]["intro"] == {"title": "Scales", "description": "", "points": []}
        assert parsed["data"]["note"] is None

    def test_timestamp_is_iso_utc(self) -> None:
        parsed = json.loads(format_json_response(data={"x": 1}, command="test"))
        assert parsed["timestamp"].endswith("+00:00")


class TestFormatJsonError:
    """Tests for :func:`format_json_error`."""

    def test_basic_error(self) -> None:
        raw = format_json_error(
            code="invalid_temperature", message="Invalid number: 'abc'", command="convert"
        )
        parsed = json.loads(raw)

        assert parsed["ok"] is False
        assert parsed["command"] == "convert"
        assert parsed["error"]["code"] == "invalid_temperature"
        assert parsed["error"]["message"] == "Invalid number: 'abc'"
        assert "timestamp" in parsed

    def test_extra_fields(self) -> None:
        raw = format_json_error(code="unknown_scale", message="m", command="scales.info", name="x")
        assert json.loads(raw)["error"]["name"] == "x"


class TestSerialisation:
    def test_overflowed_values_stay_valid_json(self) -> None:
        result = ConversionResult(
            value=1e308,
            from_scale=TemperatureScale.CELSIUS,
            to_scale=TemperatureScale.FAHRENHEIT,
            result=float("inf"),
            formatted="inf °F",
        )
        raw = format_json_response(data=result, command="convert")
        assert "Infinity" not in raw
        assert json.loads(raw)["data"]["result"] == "inf"

    def test_nan_in_plain_data(self) -> None:
        parsed = json.loads(format_json_response(data=[float("nan")], command="test"))
        assert parsed["data"] == ["nan"]

    def test_registry_mapping(self) -> None:
        parsed = json.loads(format_json_response(data=SCALES, command="scales.list"))
        assert list(parsed["data"])[0] == "kelvin"
        assert parsed["data"]["romer"]["symbol"] == "°Rø"

    def test_optional_fields_omitted(self) -> None:
        state = SessionState(
            input="1",
            from_scale=TemperatureScale.CELSIUS,
            to_scale=TemperatureScale.CELSIUS,
            result=1,
            formatted="1.00 °C",
        )
        parsed = json.loads(format_json_response(data=state, command="interactive"))
        assert "error" not in parsed["data"]
