"""Route command payloads to JSON envelopes or Rich renderers.

Commands hand a model (or a list of models) to :meth:`OutputFormatter.output`
and never branch on the output format themselves.  In JSON mode the payload
is wrapped in an envelope; otherwise the payload's type picks the
:class:`RichOutput` method that draws it.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from thermocmd.models.conversion import (
    ConversionResult,
    ReferenceReading,
    ScaleEntry,
    ScaleReading,
    SessionState,
)
from thermocmd.models.reference import CatalogAbout, Curiosity, HistoricalEvent, ScaleDetail
from thermocmd.output.json_output import format_json_error, format_json_response
from thermocmd.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase

FORMATS = ("rich", "json", "quiet")


def detect_format(stream: Any) -> str:
    """Pick ``"rich"`` for an interactive terminal and ``"json"`` for pipes and files."""
    isatty = getattr(stream, "isatty", None)
    return "rich" if isatty is not None and isatty() else "json"


class OutputFormatter:
    """Emit command results as JSON or as Rich terminal output.

    *force_format* (``"rich"``, ``"json"`` or ``"quiet"``) overrides the
    TTY detection done on *stream*.  Quiet mode draws on stderr so stdout
    stays empty.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        self._format = force_format or detect_format(self._stream)
        if self._format == "quiet":
            console = Console(stderr=True)
        elif stream is not None:
            console = Console(file=stream)
        else:
            console = Console()
        self._rich = RichOutput(console)

    @property
    def format(self) -> str:  # noqa: A003
        return self._format

    @property
    def rich(self) -> RichOutput:
        return self._rich

    def output(
        self,
        data: Any,
        *,
        command: str,
        decimals: int = 2,
        title: str | None = None,
    ) -> None:
        """Emit *data* for *command*.

        *decimals* is the precision used when a terminal rendering formats
        values itself (the source side of a conversion); *title* captions
        every-scale tables.
        """
        if self._format == "json":
            self._write(format_json_response(data=data, command=command))
        else:
            self._render(data, decimals=decimals, title=title)

    def output_error(self, *, code: str, message: str, command: str) -> None:
        if self._format == "json":
            self._write(format_json_error(code=code, message=message, command=command))
        else:
            self._rich.error(message)

    def _write(self, text: str) -> None:
        print(text, file=self._stream)  # noqa: T201

    def _render(self, data: Any, *, decimals: int, title: str | None) -> None:
        rich = self._rich
        if isinstance(data, ConversionResult):
            rich.conversion(data, decimals=decimals)
        elif isinstance(data, SessionState):
            rich.session(data)
        elif isinstance(data, ScaleDetail):
            rich.scale_detail(data)
        elif isinstance(data, CatalogAbout):
            rich.about(data)
        elif isinstance(data, str):
            rich.info(data)
        elif isinstance(data, list):
            self._render_rows(data, title=title)
        else:
            raise TypeError(f"No terminal rendering for {type(data).__name__}")

    def _render_rows(self, rows: list[Any], *, title: str | None) -> None:
        rich = self._rich
        if not rows:
            rich.info("[dim]Nothing to show.[/dim]")
            return
        first = rows[0]
        if isinstance(first, ScaleReading):
            rich.all_scales(rows, title=title or "All scales")
        elif isinstance(first, ScaleEntry):
            rich.scale_list(rows)
        elif isinstance(first, ReferenceReading):
            rich.common_temperatures(rows)
        elif isinstance(first, HistoricalEvent):
            rich.history(rows)
        elif isinstance(first, Curiosity):
            rich.curiosities(rows)
        else:
            raise TypeError(f"No terminal rendering for a list of {type(first).__name__}")
