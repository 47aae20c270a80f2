from __future__ import annotations

from pydantic import BaseModel

from thermocmd.models.scale import TemperatureScale


class ConversionResult(BaseModel):
    """A single conversion as reported by the CLI."""

    value: float
    from_scale: TemperatureScale
    to_scale: TemperatureScale
    result: float
    formatted: str


class ScaleReading(BaseModel):
    """One row of an every-scale table."""

    scale: TemperatureScale
    symbol: str
    value: float
    formatted: str


class ScaleEntry(BaseModel):
    """A registry entry together with its scale id."""

    id: TemperatureScale
    name: str
    symbol: str
    description: str


class ReferenceReading(BaseModel):
    """A catalog reference temperature expressed in a chosen scale."""

    name: str
    celsius: float
    scale: TemperatureScale
    value: float
    formatted: str
    description: str = ""


class SessionState(BaseModel):
    """What an interactive session shows after each line of input."""

    input: str
    from_scale: TemperatureScale
    to_scale: TemperatureScale
    result: float
    formatted: str
    error: str | None = None
