"""Interactive conversion prompt driven by :class:`ConverterSession`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from thermocmd.cli._options import SCALE, global_options
from thermocmd.conversion.session import ConverterSession
from thermocmd.models.config import MAX_DECIMALS
from thermocmd.models.conversion import SessionState
from thermocmd.models.scale import TemperatureScale
from thermocmd.reference.catalog import load_catalog

if TYPE_CHECKING:
    from thermocmd.cli.main import AppContext
    from thermocmd.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Type a number to convert it.  Commands:
  :from SCALE    change the source scale
  :to SCALE      change the destination scale
  :swap          exchange source and destination
  :decimals N    show N decimal places (0-4)
  :ref NAME      load a reference temperature (e.g. ':ref boils')
  :reset         restore the starting state
  :help          show this help
  :quit          leave"""


def _snapshot(session: ConverterSession, decimals: int) -> SessionState:
    return SessionState(
        input=session.input_value,
        from_scale=session.from_scale,
        to_scale=session.to_scale,
        result=session.converted_value,
        formatted=session.format_result(decimals),
        error=session.error,
    )


def _parse_decimals(arg: str) -> int | None:
    try:
        decimals = int(arg)
    except ValueError:
        return None
    return decimals if 0 <= decimals <= MAX_DECIMALS else None


class _Quit(Exception):
    pass


def _run_command(
    line: str,
    session: ConverterSession,
    app_ctx: AppContext,
    formatter: OutputFormatter,
) -> int | None:
    """Apply a ``:command`` line; return a new decimal precision when it changes."""
    name, _, arg = line[1:].strip().partition(" ")
    arg = arg.strip()
    name = name.lower()

    if name in ("q", "quit", "exit"):
        raise _Quit
    if name == "help":
        formatter.output(HELP_TEXT, command="interactive.help")
    elif name in ("from", "to"):
        scale = TemperatureScale.parse(arg)
        if scale is None:
            formatter.output_error(
                code="unknown_scale",
                message=f"Unknown temperature scale: {arg!r}",
                command="interactive",
            )
            return None
        if name == "from":
            session.set_from_scale(scale)
        else:
            session.set_to_scale(scale)
    elif name == "swap":
        session.swap_scales()
    elif name == "reset":
        session.reset()
    elif name == "decimals":
        decimals = _parse_decimals(arg)
        if decimals is None:
            formatter.output_error(
                code="invalid_decimals",
                message=f"Decimals must be between 0 and {MAX_DECIMALS}",
                command="interactive",
            )
            return None
        return decimals
    elif name == "ref":
        needle = arg.lower()
        catalog = load_catalog(app_ctx.settings.catalog_file)
        match = next(
            (t for t in catalog.common_temperatures if needle and needle in t.name.lower()),
            None,
        )
        if match is None:
            formatter.output_error(
                code="unknown_reference",
                message=f"No reference temperature matches {arg!r}",
                command="interactive",
            )
            return None
        session.set_common_temperature(match.celsius)
    else:
        formatter.output_error(
            code="unknown_command",
            message=f"Unknown command ':{name}'. Type :help for a list.",
            command="interactive",
        )
    return None


@click.command("interactive")
@click.option("--from", "-f", "from_scale", type=SCALE, default=None, help="Source scale")
@click.option("--to", "-t", "to_scale", type=SCALE, default=None, help="Destination scale")
@global_options
def interactive_cmd(
    app_ctx: AppContext,
    from_scale: TemperatureScale | None,
    to_scale: TemperatureScale | None,
) -> None:
    """Convert values as you type them.

    Invalid input is reported and the prompt continues.  End with :quit or Ctrl-D.
    """
    formatter = app_ctx.formatter
    session = ConverterSession(
        from_scale=from_scale or app_ctx.settings.from_scale,
        to_scale=to_scale or app_ctx.settings.to_scale,
    )
    decimals = app_ctx.precision

    if formatter.format != "json":
        formatter.rich.info(HELP_TEXT)

    while True:
        try:
            line = click.prompt(
                f"{session.from_scale} → {session.to_scale}",
                default="",
                show_default=False,
                prompt_suffix="> ",
            )
        except click.exceptions.Abort:
            break

        line = line.strip()
        try:
            if line.startswith(":"):
                new_decimals = _run_command(line, session, app_ctx, formatter)
                if new_decimals is not None:
                    decimals = new_decimals
                if line[1:].strip().lower() == "help":
                    continue
            else:
                session.set_input(line)
        except _Quit:
            break

        formatter.output(_snapshot(session, decimals), command="interactive")

    logger.debug("Interactive session ended")
