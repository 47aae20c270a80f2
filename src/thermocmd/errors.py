"""Exception hierarchy for thermocmd."""

from __future__ import annotations


class ThermoError(Exception):
    """Base class for all thermocmd errors."""


class InvalidTemperatureError(ThermoError, ValueError):
    """Raised when text input cannot be read as a finite temperature value."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid number: {text!r}")


class UnknownScaleError(ThermoError, LookupError):
    """Raised by catalog lookups for names that match no temperature scale."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown temperature scale: {name!r}")


class CatalogError(ThermoError):
    """Raised when the reference catalog file is missing or malformed."""
