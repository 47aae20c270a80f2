"""CLI commands for the temperature-scale registry and reference catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from thermocmd.cli._options import SCALE, global_options
from thermocmd.models.conversion import ScaleEntry
from thermocmd.models.reference import CatalogAbout
from thermocmd.models.scale import SCALES, TemperatureScale
from thermocmd.reference.catalog import load_catalog, reference_readings, scale_detail

if TYPE_CHECKING:
    from thermocmd.cli.main import AppContext
    from thermocmd.models.reference import ScaleCatalog

scales_group = click.Group("scales", help="Temperature scale reference")


def _catalog(app_ctx: AppContext) -> ScaleCatalog:
    return load_catalog(app_ctx.settings.catalog_file)


@scales_group.command("list")
@global_options
def list_cmd(app_ctx: AppContext) -> None:
    """List the supported scales and their symbols."""
    entries = [ScaleEntry(id=scale, **info.model_dump()) for scale, info in SCALES.items()]
    app_ctx.formatter.output(entries, command="scales.list")


@scales_group.command("info")
@click.argument("scale")
@global_options
def info_cmd(app_ctx: AppContext, scale: str) -> None:
    """Show inventor, formula and key facts for SCALE.

    SCALE is a scale id (e.g. ``reaumur``) or part of its name.
    """
    detail = scale_detail(scale, path=app_ctx.settings.catalog_file)
    app_ctx.formatter.output(detail, command="scales.info")


@scales_group.command("history")
@global_options
def history_cmd(app_ctx: AppContext) -> None:
    """Show a timeline of thermometry milestones."""
    app_ctx.formatter.output(_catalog(app_ctx).historical_events, command="scales.history")


@scales_group.command("reference")
@click.option(
    "--scale",
    "-s",
    "target",
    type=SCALE,
    default=TemperatureScale.CELSIUS.value,
    show_default=True,
    help="Scale to express the reference temperatures in",
)
@global_options
def reference_cmd(app_ctx: AppContext, target: TemperatureScale) -> None:
    """Show well-known reference temperatures."""
    readings = reference_readings(
        target, app_ctx.precision, path=app_ctx.settings.catalog_file
    )
    app_ctx.formatter.output(readings, command="scales.reference")


@scales_group.command("curiosities")
@global_options
def curiosities_cmd(app_ctx: AppContext) -> None:
    """Show temperature trivia."""
    app_ctx.formatter.output(_catalog(app_ctx).curiosities, command="scales.curiosities")


@scales_group.command("about")
@global_options
def about_cmd(app_ctx: AppContext) -> None:
    """Show the introduction and closing note of the reference catalog."""
    catalog = _catalog(app_ctx)
    about = CatalogAbout(intro=catalog.intro_text, final_note=catalog.final_note)
    app_ctx.formatter.output(about, command="scales.about")
