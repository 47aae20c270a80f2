"""JSON envelopes for machine-readable output.

Success::

    {"ok": true, "command": "convert", "data": {...}, "timestamp": "..."}

Failure::

    {"ok": false, "command": "convert", "error": {"code": "...", "message": "..."},
     "timestamp": "..."}

Converting extreme values can overflow to ``inf``.  Such floats are
written as the strings ``"inf"``, ``"-inf"`` or ``"nan"`` (the same text
:func:`~thermocmd.conversion.format_temperature` prints) so every envelope
is strict JSON.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return _jsonable(obj.model_dump(exclude_none=True))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, float) and not math.isfinite(obj):
        return str(obj)
    if isinstance(obj, Mapping):
        return {str(_jsonable(k)): _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [_jsonable(item) for item in obj]
    return obj


def _envelope(*, ok: bool, command: str, body: dict[str, Any]) -> str:
    envelope = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    # Scale symbols (°, ø, é) are kept as-is rather than \u-escaped.
    return json.dumps(envelope, indent=2, default=str, ensure_ascii=False, allow_nan=False)


def format_json_response(*, data: Any, command: str) -> str:
    """Wrap *data* (models, lists, mappings, enums) in a success envelope."""
    return _envelope(ok=True, command=command, body={"data": _jsonable(data)})


def format_json_error(
    *,
    code: str,
    message: str,
    command: str,
    **extra: Any,
) -> str:
    """Wrap an error *code* and *message* in a failure envelope.

    Keyword arguments in *extra* are added to the ``error`` object.
    """
    error = {"code": code, "message": message, **_jsonable(extra)}
    return _envelope(ok=False, command=command, body={"error": error})
