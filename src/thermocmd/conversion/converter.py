"""Temperature conversion and formatting.

Every conversion goes through Celsius: the source value is first brought
to Celsius, then expressed in the destination scale.  Two formula tables
(to-Celsius and from-Celsius) therefore cover all scale pairs.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING

from thermocmd.models.conversion import ScaleReading
from thermocmd.models.scale import SCALES, TemperatureScale, scale_symbol

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_DOUBLE_DIGITS = 330

_TO_CELSIUS: dict[TemperatureScale, Callable[[float], float]] = {
    TemperatureScale.KELVIN: lambda v: v - 273.15,
    TemperatureScale.CELSIUS: lambda v: v,
    TemperatureScale.FAHRENHEIT: lambda v: (v - 32) * 5 / 9,
    TemperatureScale.RANKINE: lambda v: (v - 491.67) * 5 / 9,
    TemperatureScale.REAUMUR: lambda v: v * 5 / 4,
    TemperatureScale.ROMER: lambda v: (v - 7.5) * 40 / 21,
    TemperatureScale.NEWTON: lambda v: v * 100 / 33,
    TemperatureScale.DELISLE: lambda v: 100 - v * 2 / 3,
}

_FROM_CELSIUS: dict[TemperatureScale, Callable[[float], float]] = {
    TemperatureScale.KELVIN: lambda c: c + 273.15,
    TemperatureScale.CELSIUS: lambda c: c,
    TemperatureScale.FAHRENHEIT: lambda c: c * 9 / 5 + 32,
    TemperatureScale.RANKINE: lambda c: (c + 273.15) * 9 / 5,
    TemperatureScale.REAUMUR: lambda c: c * 4 / 5,
    TemperatureScale.ROMER: lambda c: c * 21 / 40 + 7.5,
    TemperatureScale.NEWTON: lambda c: c * 33 / 100,
    TemperatureScale.DELISLE: lambda c: (100 - c) * 3 / 2,
}


def _apply(
    table: dict[TemperatureScale, Callable[[float], float]],
    value: float,
    scale: str | TemperatureScale,
) -> float:
    member = TemperatureScale.parse(scale)
    if member is None:
        # Unknown identifiers (untyped boundary data) pass through unchanged.
        logger.debug("Unknown temperature scale %r; value passed through", scale)
        return value
    return table[member](value)


def to_celsius(value: float, scale: str | TemperatureScale) -> float:
    """Express *value*, read in *scale*, in degrees Celsius."""
    return _apply(_TO_CELSIUS, value, scale)


def from_celsius(value: float, scale: str | TemperatureScale) -> float:
    """Express a Celsius *value* in *scale*."""
    return _apply(_FROM_CELSIUS, value, scale)


def convert_temperature(
    value: float,
    from_scale: str | TemperatureScale,
    to_scale: str | TemperatureScale,
) -> float:
    """Convert *value* from *from_scale* to *to_scale*.

    The conversion is a pure function of its inputs and never raises for a
    finite number.  Converting a scale to itself returns *value* untouched,
    so no floating-point drift is introduced by the Celsius round trip.

    Scale identifiers may be :class:`TemperatureScale` members or their
    string ids (case-insensitive).  An identifier outside the supported set
    is treated as a no-op leg: the value is passed through that half of the
    conversion unchanged, so ``convert_temperature(v, "bogus", "bogus")``
    returns *v*.
    """
    src = TemperatureScale.parse(from_scale) or from_scale
    dst = TemperatureScale.parse(to_scale) or to_scale
    if src == dst:
        return value
    return from_celsius(to_celsius(value, src), dst)


def _round_half_up(value: float, decimals: int) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    # Adding 0.0 turns -0.0 into 0.0; Decimal would otherwise keep the sign.
    exact = Decimal(value + 0.0)
    # Wide enough for any double (up to ~1.8e308) at the requested precision.
    ctx = Context(prec=_DOUBLE_DIGITS + decimals)
    return format(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=ctx), "f")


def format_temperature(
    value: float,
    scale: str | TemperatureScale,
    decimals: int = 2,
) -> str:
    """Render *value* with the symbol of *scale*, e.g. ``"25.50 °C"``.

    The exact binary value is rounded half away from zero to *decimals*
    fractional digits; ``decimals=0`` yields no decimal point.  Negative
    *decimals* raise :class:`ValueError`.

    Negative zero prints as ``0``, but a small negative value keeps its
    sign after rounding (``-0.001`` gives ``"-0.00"``).  Magnitudes of 1e21
    and above are written out in full rather than in exponent notation.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    text = _round_half_up(value, decimals) if math.isfinite(value) else str(value)
    return f"{text} {scale_symbol(scale)}"


def scale_readings(
    value: float,
    from_scale: str | TemperatureScale,
    decimals: int = 2,
) -> list[ScaleReading]:
    """Express *value*, read in *from_scale*, in every supported scale."""
    readings: list[ScaleReading] = []
    for scale, info in SCALES.items():
        converted = convert_temperature(value, from_scale, scale)
        readings.append(
            ScaleReading(
                scale=scale,
                symbol=info.symbol,
                value=converted,
                formatted=format_temperature(converted, scale, decimals),
            )
        )
    return readings


def convert_to_all_scales(celsius: float, decimals: int = 1) -> dict[str, str]:
    """Return *celsius* formatted in every supported scale, keyed by scale id."""
    readings = scale_readings(celsius, TemperatureScale.CELSIUS, decimals)
    return {str(r.scale): r.formatted for r in readings}
