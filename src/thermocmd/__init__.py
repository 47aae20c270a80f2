"""thermocmd: temperature scale conversion and reference."""

__version__ = "0.1.0"
