"""Pydantic v2 models for the bundled temperature-scale reference catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from thermocmd.models.scale import TemperatureScale

_EXTRA_IGNORE = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class ScaleDetail(BaseModel):
    model_config = _EXTRA_IGNORE

    id: int
    scale: TemperatureScale
    name: str
    symbol: str
    color: str = "#888888"
    description: str = ""
    inventor: str = ""
    year: str = ""
    key_points: list[str] = Field(default_factory=list, alias="keyPoints")
    formula: str = ""
    usage: str = ""


class HistoricalEvent(BaseModel):
    model_config = _EXTRA_IGNORE

    year: str
    event: str


class CommonTemperature(BaseModel):
    """A well-known reference temperature, stored in Celsius."""

    model_config = _EXTRA_IGNORE

    name: str
    celsius: float
    description: str = ""


class Curiosity(BaseModel):
    model_config = _EXTRA_IGNORE

    icon: str = ""
    text: str


class IntroText(BaseModel):
    model_config = _EXTRA_IGNORE

    title: str
    description: str = ""
    points: list[str] = Field(default_factory=list)


class FinalNote(BaseModel):
    model_config = _EXTRA_IGNORE

    title: str
    text: str


class ScaleCatalog(BaseModel):
    """The complete reference catalog as shipped in ``temperature_scales.json``."""

    model_config = _EXTRA_IGNORE

    temperature_scales: list[ScaleDetail] = Field(alias="temperatureScales")
    historical_events: list[HistoricalEvent] = Field(
        default_factory=list, alias="historicalEvents"
    )
    common_temperatures: list[CommonTemperature] = Field(
        default_factory=list, alias="commonTemperatures"
    )
    curiosities: list[Curiosity] = Field(default_factory=list)
    intro_text: IntroText | None = Field(default=None, alias="introText")
    final_note: FinalNote | None = Field(default=None, alias="finalNote")


class CatalogAbout(BaseModel):
    """Opening and closing text of the catalog, shown by ``scales about``."""

    intro: IntroText | None = None
    final_note: FinalNote | None = None
