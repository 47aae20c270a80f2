"""Loading and lookup for the temperature-scale reference catalog.

The catalog ships as ``thermocmd/data/temperature_scales.json``.  A
different file can be supplied (``THERMO_CATALOG_FILE`` or the ``path``
argument) as long as it follows the same layout.
"""

from __future__ import annotations

import functools
import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from thermocmd.conversion.converter import convert_temperature, format_temperature
from thermocmd.errors import CatalogError, UnknownScaleError
from thermocmd.models.conversion import ReferenceReading
from thermocmd.models.reference import ScaleCatalog, ScaleDetail
from thermocmd.models.scale import TemperatureScale

logger = logging.getLogger(__name__)

_BUNDLED = "temperature_scales.json"


def _read_text(path: Path | str | None) -> str:
    if path is None:
        return (resources.files("thermocmd") / "data" / _BUNDLED).read_text(encoding="utf-8")
    resolved = Path(path).expanduser()
    try:
        return resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog file {resolved}: {exc}") from exc


@functools.cache
def _load_cached(path: str | None) -> ScaleCatalog:
    text = _read_text(path)
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog is not valid JSON: {exc}") from exc
    try:
        catalog = ScaleCatalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Catalog has an unexpected layout: {exc}") from exc
    logger.debug(
        "Loaded catalog from %s (%d scales)",
        path or _BUNDLED,
        len(catalog.temperature_scales),
    )
    return catalog


def load_catalog(path: Path | str | None = None) -> ScaleCatalog:
    """Return the reference catalog, reading it at most once per *path*."""
    key = str(Path(path).expanduser()) if path is not None else None
    return _load_cached(key)


def scale_by_id(scale_id: int, *, path: Path | str | None = None) -> ScaleDetail | None:
    """Return the catalog entry with numeric *scale_id*, or ``None``."""
    catalog = load_catalog(path)
    return next((s for s in catalog.temperature_scales if s.id == scale_id), None)


def scale_by_name(name: str, *, path: Path | str | None = None) -> ScaleDetail | None:
    """Return the first entry whose display name contains *name* (case-insensitive)."""
    needle = name.lower()
    catalog = load_catalog(path)
    return next((s for s in catalog.temperature_scales if needle in s.name.lower()), None)


def scale_detail(
    scale: str | TemperatureScale, *, path: Path | str | None = None
) -> ScaleDetail:
    """Return the catalog entry for *scale*.

    *scale* may be a scale id (``"reaumur"``) or part of a display name
    (``"Réau"``).  Raises :class:`UnknownScaleError` when nothing matches.
    """
    member = TemperatureScale.parse(scale)
    catalog = load_catalog(path)
    if member is not None:
        for detail in catalog.temperature_scales:
            if detail.scale == member:
                return detail
    elif str(scale).strip():
        found = scale_by_name(str(scale), path=path)
        if found is not None:
            return found
    raise UnknownScaleError(str(scale))


def reference_readings(
    scale: TemperatureScale,
    decimals: int = 2,
    *,
    path: Path | str | None = None,
) -> list[ReferenceReading]:
    """Return the catalog's common temperatures expressed in *scale*."""
    readings: list[ReferenceReading] = []
    for temp in load_catalog(path).common_temperatures:
        value = convert_temperature(temp.celsius, TemperatureScale.CELSIUS, scale)
        readings.append(
            ReferenceReading(
                name=temp.name,
                celsius=temp.celsius,
                scale=scale,
                value=value,
                formatted=format_temperature(value, scale, decimals),
                description=temp.description,
            )
        )
    return readings
