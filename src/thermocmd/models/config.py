from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from thermocmd.models.scale import TemperatureScale

MAX_DECIMALS = 4


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="THERMO_",
        extra="ignore",
    )

    from_scale: TemperatureScale = TemperatureScale.CELSIUS
    to_scale: TemperatureScale = TemperatureScale.FAHRENHEIT
    decimals: int = Field(default=2, ge=0, le=MAX_DECIMALS)
    output_format: str | None = None
    catalog_file: str | None = None
