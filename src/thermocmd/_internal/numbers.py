"""Lenient numeric parsing for user-entered temperature text."""

from __future__ import annotations

import math
import re

# Optional sign, digits with an optional fraction (or a bare fraction), optional exponent.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

PENDING_INPUTS = frozenset({"", "-"})


def is_pending_input(text: str) -> bool:
    """Return ``True`` for input that is still being typed (empty or a lone ``-``)."""
    return text.strip() in PENDING_INPUTS


def parse_temperature_input(text: str) -> float | None:
    """Read the leading decimal literal of *text* as a float.

    Surrounding whitespace is ignored and anything after the leading number
    is dropped (``"12.5abc"`` reads as ``12.5``).  Returns ``None`` when no
    finite number can be read, including ``"inf"`` and ``"nan"``.
    """
    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        # e.g. "1e999" overflows to inf
        return None
    return value
