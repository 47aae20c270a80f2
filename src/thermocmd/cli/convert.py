"""CLI commands for one-shot conversions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from thermocmd.cli._options import NUMERIC_ARGS, SCALE, global_options, read_temperature
from thermocmd.conversion.converter import (
    convert_temperature,
    format_temperature,
    scale_readings,
)
from thermocmd.models.conversion import ConversionResult

if TYPE_CHECKING:
    from thermocmd.cli.main import AppContext
    from thermocmd.models.scale import TemperatureScale

logger = logging.getLogger(__name__)


@click.command("convert", context_settings=NUMERIC_ARGS)
@click.argument("value")
@click.option("--from", "-f", "from_scale", type=SCALE, default=None, help="Source scale")
@click.option("--to", "-t", "to_scale", type=SCALE, default=None, help="Destination scale")
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: str,
    from_scale: TemperatureScale | None,
    to_scale: TemperatureScale | None,
) -> None:
    """Convert VALUE from one temperature scale to another.

    Scales default to THERMO_FROM_SCALE / THERMO_TO_SCALE
    (celsius and fahrenheit when unset).
    """
    src = from_scale or app_ctx.settings.from_scale
    dst = to_scale or app_ctx.settings.to_scale
    number = read_temperature(value)

    converted = convert_temperature(number, src, dst)
    logger.debug("convert %r %s -> %s = %r", number, src, dst, converted)
    result = ConversionResult(
        value=number,
        from_scale=src,
        to_scale=dst,
        result=converted,
        formatted=format_temperature(converted, dst, app_ctx.precision),
    )

    app_ctx.formatter.output(result, command="convert", decimals=app_ctx.precision)


@click.command("table", context_settings=NUMERIC_ARGS)
@click.argument("value")
@click.option("--from", "-f", "from_scale", type=SCALE, default=None, help="Source scale")
@global_options
def table_cmd(
    app_ctx: AppContext,
    value: str,
    from_scale: TemperatureScale | None,
) -> None:
    """Show VALUE expressed in every supported scale."""
    src = from_scale or app_ctx.settings.from_scale
    number = read_temperature(value)

    readings = scale_readings(number, src, app_ctx.precision)
    source = format_temperature(number, src, app_ctx.precision)
    app_ctx.formatter.output(readings, command="table", title=f"{source} in all scales")
