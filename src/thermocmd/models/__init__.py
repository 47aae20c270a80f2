from __future__ import annotations

from thermocmd.models.config import MAX_DECIMALS, AppSettings
from thermocmd.models.conversion import (
    ConversionResult,
    ReferenceReading,
    ScaleEntry,
    ScaleReading,
    SessionState,
)
from thermocmd.models.reference import (
    CatalogAbout,
    CommonTemperature,
    Curiosity,
    FinalNote,
    HistoricalEvent,
    IntroText,
    ScaleCatalog,
    ScaleDetail,
)
from thermocmd.models.scale import SCALES, ScaleInfo, TemperatureScale, scale_symbol

__all__ = [
    # config
    "MAX_DECIMALS",
    "AppSettings",
    # conversion
    "ConversionResult",
    "ReferenceReading",
    "ScaleEntry",
    "ScaleReading",
    "SessionState",
    # reference
    "CatalogAbout",
    "CommonTemperature",
    "Curiosity",
    "FinalNote",
    "HistoricalEvent",
    "IntroText",
    "ScaleCatalog",
    "ScaleDetail",
    # scale
    "SCALES",
    "ScaleInfo",
    "TemperatureScale",
    "scale_symbol",
]
