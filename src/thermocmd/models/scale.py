"""Temperature scale registry.

The eight supported scales form a closed set.  Each one carries an
immutable :class:`ScaleInfo` with its display name, symbol and a short
description; the registry itself is a read-only mapping shared by the
whole process.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

_FROZEN = ConfigDict(frozen=True)


class TemperatureScale(StrEnum):
    """Supported temperature scales, identified by their lowercase id."""

    KELVIN = "kelvin"
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    RANKINE = "rankine"
    REAUMUR = "reaumur"
    ROMER = "romer"
    NEWTON = "newton"
    DELISLE = "delisle"

    @classmethod
    def parse(cls, value: str | TemperatureScale) -> TemperatureScale | None:
        """Return the member for *value* (case-insensitive), or ``None``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class ScaleInfo(BaseModel):
    model_config = _FROZEN

    name: str
    symbol: str
    description: str


SCALES: MappingProxyType[TemperatureScale, ScaleInfo] = MappingProxyType(
    {
        TemperatureScale.KELVIN: ScaleInfo(
            name="Kelvin",
            symbol="K",
            description="Absolute thermodynamic scale starting at absolute zero.",
        ),
        TemperatureScale.CELSIUS: ScaleInfo(
            name="Celsius",
            symbol="°C",
            description="Metric scale with water freezing at 0 and boiling at 100.",
        ),
        TemperatureScale.FAHRENHEIT: ScaleInfo(
            name="Fahrenheit",
            symbol="°F",
            description="Imperial scale with water freezing at 32 and boiling at 212.",
        ),
        TemperatureScale.RANKINE: ScaleInfo(
            name="Rankine",
            symbol="°R",
            description="Absolute scale using Fahrenheit-sized degrees.",
        ),
        TemperatureScale.REAUMUR: ScaleInfo(
            name="Réaumur",
            symbol="°Ré",
            description="Historic scale with water boiling at 80 degrees.",
        ),
        TemperatureScale.ROMER: ScaleInfo(
            name="Rømer",
            symbol="°Rø",
            description="Early scale with brine freezing at 0 and water boiling at 60.",
        ),
        TemperatureScale.NEWTON: ScaleInfo(
            name="Newton",
            symbol="°N",
            description="Isaac Newton's scale with water boiling at 33 degrees.",
        ),
        TemperatureScale.DELISLE: ScaleInfo(
            name="Delisle",
            symbol="°De",
            description="Inverted scale: water boils at 0 and freezes at 150.",
        ),
    }
)


def scale_symbol(scale: str | TemperatureScale) -> str:
    """Return the display symbol for *scale*.

    Unknown identifiers fall back to the identifier text itself.
    """
    member = TemperatureScale.parse(scale)
    if member is None:
        return str(scale)
    return SCALES[member].symbol
