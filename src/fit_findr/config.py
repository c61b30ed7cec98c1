"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fit_findr.models import DEFAULT_ORIGIN_LAT, DEFAULT_ORIGIN_LNG, Coordinates


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FITFINDR_",
        extra="ignore",
    )

    # Catalog source (empty uses the built-in gym list)
    catalog_path: str = Field(
        default="",
        description="Path to a JSON file with gym records to browse instead of the built-in list",
    )

    # Price slider
    price_slider_max: int = Field(default=4000, ge=0, description="Upper end of the price slider")
    default_max_price: int = Field(
        default=4000,
        ge=0,
        description="Price ceiling restored when filters are cleared",
    )

    # Text search rate limiting
    search_debounce_ms: int = Field(
        default=300,
        ge=0,
        le=5000,
        description="Quiet period before a typed search query is applied",
    )

    # Distance sorting origin
    origin_lat: float = Field(default=DEFAULT_ORIGIN_LAT, ge=-90, le=90)
    origin_lng: float = Field(default=DEFAULT_ORIGIN_LNG, ge=-180, le=180)

    log_json: bool = Field(default=False, description="Emit JSON log lines instead of console")

    def get_catalog_path(self) -> Path | None:
        """Return the configured catalog file, or None for the built-in list."""
        value = self.catalog_path.strip()
        return Path(value) if value else None

    def get_origin(self) -> Coordinates:
        return Coordinates(lat=self.origin_lat, lng=self.origin_lng)

    @property
    def search_debounce_seconds(self) -> float:
        return self.search_debounce_ms / 1000
