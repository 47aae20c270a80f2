"""Interactive conversion state.

:class:`ConverterSession` holds what an interactive front end edits (the
raw input text and the selected scales) together with what it displays
(the converted value and a recoverable validation error).  Text is
checked here before it ever reaches :func:`convert_temperature`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from thermocmd._internal.numbers import is_pending_input, parse_temperature_input
from thermocmd.conversion.converter import convert_temperature, format_temperature
from thermocmd.models.scale import SCALES, TemperatureScale

if TYPE_CHECKING:
    from thermocmd.models.scale import ScaleInfo

logger = logging.getLogger(__name__)

INVALID_NUMBER = "Invalid number"


def _number_text(value: float) -> str:
    """Render *value* as input text, without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


class ConverterSession:
    """Mutable conversion state for one interactive user."""

    def __init__(
        self,
        *,
        initial_value: float = 0,
        from_scale: TemperatureScale = TemperatureScale.CELSIUS,
        to_scale: TemperatureScale = TemperatureScale.FAHRENHEIT,
    ) -> None:
        self._initial_value = float(initial_value)
        self._initial_from = from_scale
        self._initial_to = to_scale
        self.input_value = _number_text(self._initial_value)
        self.from_scale = from_scale
        self.to_scale = to_scale
        self.converted_value = 0.0
        self.error: str | None = None
        self._recompute()

    # ------------------------------------------------------------------
    # Input and scale selection
    # ------------------------------------------------------------------

    def set_input(self, text: str) -> None:
        """Store *text* and convert it when it reads as a number.

        Pending input (empty or a lone ``-``) clears both the result and
        the error.  Unreadable text sets :attr:`error` and zeroes the
        result; it is never passed to the converter.
        """
        self.input_value = text
        if is_pending_input(text):
            self.converted_value = 0.0
            self.error = None
            return

        value = parse_temperature_input(text)
        if value is None:
            logger.debug("Rejected temperature input %r", text)
            self.error = INVALID_NUMBER
            self.converted_value = 0.0
            return

        self.error = None
        self.converted_value = convert_temperature(value, self.from_scale, self.to_scale)

    def set_from_scale(self, scale: TemperatureScale) -> None:
        self.from_scale = scale
        self._recompute()

    def set_to_scale(self, scale: TemperatureScale) -> None:
        self.to_scale = scale
        self._recompute()

    def swap_scales(self) -> None:
        """Exchange source and destination scales, keeping the input text."""
        self.from_scale, self.to_scale = self.to_scale, self.from_scale
        self._recompute()

    def set_common_temperature(self, celsius: float) -> None:
        """Load a Celsius reference value into the input, expressed in the source scale."""
        value = convert_temperature(celsius, TemperatureScale.CELSIUS, self.from_scale)
        self.set_input(_number_text(value))

    def reset(self) -> None:
        """Restore the initial input and scale selection."""
        self.input_value = _number_text(self._initial_value)
        self.from_scale = self._initial_from
        self.to_scale = self._initial_to
        self.converted_value = 0.0
        self.error = None
        self._recompute()

    def _recompute(self) -> None:
        # Scale changes only refresh the result for valid input; they leave
        # the validation error from the last edit untouched.
        if is_pending_input(self.input_value):
            return
        value = parse_temperature_input(self.input_value)
        if value is not None:
            self.converted_value = convert_temperature(value, self.from_scale, self.to_scale)

    # ------------------------------------------------------------------
    # Presentation helpers
    # ------------------------------------------------------------------

    def format_result(self, decimals: int = 2) -> str:
        return format_temperature(self.converted_value, self.to_scale, decimals)

    @staticmethod
    def scale_info(scale: TemperatureScale) -> ScaleInfo:
        return SCALES[scale]

    @property
    def all_scales(self) -> list[TemperatureScale]:
        return list(SCALES)
