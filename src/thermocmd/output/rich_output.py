from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from thermocmd.conversion.converter import format_temperature
from thermocmd.models.scale import SCALES

if TYPE_CHECKING:
    from rich.console import Console

    from thermocmd.models.conversion import (
        ConversionResult,
        ReferenceReading,
        ScaleEntry,
        ScaleReading,
        SessionState,
    )
    from thermocmd.models.reference import (
        CatalogAbout,
        Curiosity,
        HistoricalEvent,
        ScaleDetail,
    )


class RichOutput:
    """Rich-based terminal output helpers for *thermocmd*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def conversion(self, result: ConversionResult, *, decimals: int = 2) -> None:
        """Print a single conversion as ``<input> = <result>``."""
        source = format_temperature(result.value, result.from_scale, decimals)
        self._con.print(f"{escape(source)} = [bold green]{escape(result.formatted)}[/bold green]")

    def all_scales(self, readings: list[ScaleReading], *, title: str = "All scales") -> None:
        """Print a table of the same temperature in every scale."""
        table = Table(title=title)
        table.add_column("Scale", style="cyan")
        table.add_column("Symbol")
        table.add_column("Value", justify="right")

        for r in readings:
            table.add_row(SCALES[r.scale].name, r.symbol, r.formatted)

        self._con.print(table)

    def session(self, state: SessionState) -> None:
        """Print the result line of an interactive session, or its error."""
        if state.error is not None:
            self.error(state.error)
            return
        source = f"{state.input or '…'} {SCALES[state.from_scale].symbol}"
        self._con.print(f"{escape(source)} = [bold green]{escape(state.formatted)}[/bold green]")

    # ------------------------------------------------------------------
    # Reference catalog
    # ------------------------------------------------------------------

    def scale_list(self, entries: list[ScaleEntry]) -> None:
        """Print the scale registry."""
        table = Table(title="Temperature Scales")
        table.add_column("ID", style="cyan")
        table.add_column("Symbol")
        table.add_column("Name", style="bold")
        table.add_column("Description")

        for e in entries:
            table.add_row(str(e.id), e.symbol, e.name, e.description)

        self._con.print(table)

    def scale_detail(self, detail: ScaleDetail) -> None:
        """Print a panel with the reference entry of one scale."""
        style = detail.color if detail.color.startswith("#") else "bold"
        self._con.print(
            Panel(
                f"[bold]{escape(detail.name)}[/bold] ({escape(detail.symbol)})\n"
                f"{escape(detail.description)}",
                border_style=style,
                expand=False,
            )
        )

        table = Table(show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        if detail.inventor:
            table.add_row("Inventor", detail.inventor)
        if detail.year:
            table.add_row("Year", detail.year)
        if detail.formula:
            table.add_row("Formula", detail.formula)
        if detail.usage:
            table.add_row("Usage", detail.usage)
        self._con.print(table)

        for point in detail.key_points:
            self._con.print(f"  • {escape(point)}")

    def history(self, events: list[HistoricalEvent]) -> None:
        """Print a timeline of historical events."""
        table = Table(title="History")
        table.add_column("Year", style="cyan", justify="right")
        table.add_column("Event")

        for ev in events:
            table.add_row(ev.year, ev.event)

        self._con.print(table)

    def common_temperatures(self, readings: list[ReferenceReading]) -> None:
        """Print reference temperatures already expressed in one scale."""
        title = "Reference Temperatures"
        if readings:
            title += f" ({SCALES[readings[0].scale].symbol})"
        table = Table(title=title)
        table.add_column("Name", style="bold")
        table.add_column("Value", justify="right")
        table.add_column("Description")

        for r in readings:
            table.add_row(r.name, r.formatted, r.description)

        self._con.print(table)

    def curiosities(self, items: list[Curiosity]) -> None:
        """Print trivia items, one per line."""
        for item in items:
            prefix = f"{item.icon} " if item.icon else "- "
            self._con.print(f"{prefix}{escape(item.text)}")

    def about(self, about: CatalogAbout) -> None:
        """Print the catalog introduction and closing note."""
        if about.intro is not None:
            self._con.print(f"[bold]{escape(about.intro.title)}[/bold]")
            self._con.print(escape(about.intro.description))
            for point in about.intro.points:
                self._con.print(f"  • {escape(point)}")
        if about.final_note is not None:
            self._con.print()
            self._con.print(f"[bold]{escape(about.final_note.title)}[/bold]")
            self._con.print(escape(about.final_note.text))

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def info(self, message: str) -> None:
        """Print an informational message (markup allowed)."""
        self._con.print(message)
