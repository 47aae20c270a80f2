"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "thermocmd"


def configure_logging(verbose: bool) -> None:
    """Route ``thermocmd`` log records to stderr through Rich.

    DEBUG when *verbose*, WARNING otherwise.  Safe to call repeatedly; the
    handler is installed once and only the level changes.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
