"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses

import click

from thermocmd._internal.log import configure_logging
from thermocmd.errors import CatalogError, InvalidTemperatureError, UnknownScaleError
from thermocmd.models.config import MAX_DECIMALS, AppSettings
from thermocmd.output.formatter import FORMATS, OutputFormatter

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    decimals: int | None = None
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)
    _settings: AppSettings | None = dataclasses.field(default=None, repr=False)

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings()
        return self._settings

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else (self.output_format or self.settings.output_format)
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter

    @property
    def precision(self) -> int:
        """Decimal places for rendered values: CLI flag, then settings."""
        return self.decimals if self.decimals is not None else self.settings.decimals


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="thermocmd")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option(
    "--decimals",
    type=click.IntRange(0, MAX_DECIMALS),
    default=None,
    help=f"Decimal places in results (0-{MAX_DECIMALS})",
)
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
    decimals: int | None,
) -> None:
    """Convert temperatures between scales and explore their history."""
    configure_logging(verbose)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
        decimals=decimals,
    )


# ---------------------------------------------------------------------------
# Register subcommands
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from thermocmd.cli.convert import convert_cmd, table_cmd
    from thermocmd.cli.interactive import interactive_cmd
    from thermocmd.cli.scales import scales_group

    cli.add_command(convert_cmd)
    cli.add_command(interactive_cmd)
    cli.add_command(scales_group)
    cli.add_command(table_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = _get_command_name()

        if not _handle_known_error(exc, formatter, cmd_name):
            formatter.output_error(
                code=type(exc).__name__,
                message=str(exc),
                command=cmd_name,
            )
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None


def _get_command_name() -> str:
    """Reconstruct a dotted command name from the Click context chain."""
    ctx = click.get_current_context(silent=True)
    parts: list[str] = []
    while ctx is not None:
        if ctx.info_name and ctx.info_name != "cli":
            parts.append(ctx.info_name)
        ctx = ctx.parent
    return ".".join(reversed(parts)) or "unknown"


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was reported and the caller should exit.
    """
    if isinstance(exc, InvalidTemperatureError):
        _report(
            formatter,
            cmd_name,
            code="invalid_temperature",
            message=str(exc),
            hint="Pass a number such as 21.5, -40 or 1e3.",
        )
        return True
    if isinstance(exc, UnknownScaleError):
        _report(
            formatter,
            cmd_name,
            code="unknown_scale",
            message=str(exc),
            hint="Run 'thermocmd scales list' to see the supported scales.",
        )
        return True
    if isinstance(exc, CatalogError):
        _report(
            formatter,
            cmd_name,
            code="catalog_error",
            message=str(exc),
            hint="Check THERMO_CATALOG_FILE or unset it to use the bundled catalog.",
        )
        return True
    return False


def _report(
    formatter: OutputFormatter,
    cmd_name: str,
    *,
    code: str,
    message: str,
    hint: str,
) -> None:
    if formatter.format == "json":
        formatter.output_error(code=code, message=f"{message} {hint}", command=cmd_name)
        return

    formatter.rich.error(message)
    formatter.rich.info(f"[dim]{hint}[/dim]")
