"""Temperature conversion through the Celsius pivot.

Re-exports the public conversion API::

    from thermocmd.conversion import convert_temperature, format_temperature
"""

from thermocmd.conversion.converter import (
    convert_temperature,
    convert_to_all_scales,
    format_temperature,
    from_celsius,
    scale_readings,
    to_celsius,
)
from thermocmd.conversion.session import ConverterSession

__all__ = [
    "ConverterSession",
    "convert_temperature",
    "convert_to_all_scales",
    "format_temperature",
    "from_celsius",
    "scale_readings",
    "to_celsius",
]
