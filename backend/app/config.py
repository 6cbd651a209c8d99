"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Catalog service (destinations, hotels, cars, places)
    catalog_base_url: str = "http://localhost:5000/api"
    catalog_timeout_s: float = 4.0

    # Booking-creation service
    bookings_base_url: str = "http://localhost:5000/api"
    booking_timeout_s: float = 8.0

    # Planning defaults
    default_travelers: int = 2
    hotel_flow_default: bool = True

    # Budget advisory threshold (total / budget)
    budget_advisory_ratio: float = 1.2

    # Planning session undo history
    undo_depth: int = 50

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
