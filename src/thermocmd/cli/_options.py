"""Shared CLI decorators and option types."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from thermocmd._internal.log import configure_logging
from thermocmd._internal.numbers import is_pending_input, parse_temperature_input
from thermocmd.errors import InvalidTemperatureError
from thermocmd.models.config import MAX_DECIMALS
from thermocmd.models.scale import TemperatureScale
from thermocmd.output.formatter import FORMATS

if TYPE_CHECKING:
    from thermocmd.cli.main import AppContext


class ScaleChoice(click.Choice):
    """Case-insensitive choice over :class:`TemperatureScale` ids."""

    name = "scale"

    def __init__(self) -> None:
        super().__init__([s.value for s in TemperatureScale], case_sensitive=False)

    def convert(self, value: Any, param: Any, ctx: Any) -> TemperatureScale:
        if isinstance(value, TemperatureScale):
            return value
        return TemperatureScale(super().convert(value, param, ctx))


SCALE = ScaleChoice()

# Negative numbers ("-40") must reach VALUE arguments instead of being
# parsed as unknown short options.
NUMERIC_ARGS = {"ignore_unknown_options": True}


def read_temperature(text: str) -> float:
    """Parse a VALUE argument, raising :class:`InvalidTemperatureError` if unreadable."""
    value = None if is_pending_input(text) else parse_temperature_input(text)
    if value is None:
        raise InvalidTemperatureError(text)
    return value


def global_options(f: Any) -> Any:
    """Add global CLI options to a leaf command.

    Allows ``--format``, ``--quiet``, ``--verbose`` and ``--decimals`` to be
    specified **after** the subcommand name (e.g. ``thermocmd convert 20
    --format json``).  Command-level values override the root-group values
    stored in :class:`AppContext`.
    """

    @click.option(
        "--decimals",
        "local_decimals",
        type=click.IntRange(0, MAX_DECIMALS),
        default=None,
        help=f"Decimal places in results (0-{MAX_DECIMALS})",
    )
    @click.option(
        "--verbose",
        "local_verbose",
        is_flag=True,
        default=False,
        help="Enable verbose logging",
    )
    @click.option(
        "--quiet",
        "local_quiet",
        is_flag=True,
        default=False,
        help="Suppress normal output",
    )
    @click.option(
        "--format",
        "local_output_format",
        type=click.Choice(FORMATS),
        default=None,
        help="Output format (default: auto-detect)",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        local_output_format: str | None = kwargs.pop("local_output_format", None)
        local_quiet: bool = kwargs.pop("local_quiet", False)
        local_verbose: bool = kwargs.pop("local_verbose", False)
        local_decimals: int | None = kwargs.pop("local_decimals", None)

        # Merge overrides into AppContext (command-level wins)
        if local_output_format is not None:
            app_ctx.output_format = local_output_format
            app_ctx._formatter = None  # reset cached formatter
        if local_quiet:
            app_ctx.quiet = True
            app_ctx._formatter = None
        if local_verbose:
            app_ctx.verbose = True
            configure_logging(True)
        if local_decimals is not None:
            app_ctx.decimals = local_decimals

        return f(app_ctx, **kwargs)

    functools.update_wrapper(wrapper, f)
    return wrapper
