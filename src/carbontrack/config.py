"""Engine settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables with CARBONTRACK_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="CARBONTRACK_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Emissions ---
    # Raise on unknown unit pairs instead of passing the quantity through
    strict_unit_conversion: bool = False

    # --- Offsets ---
    default_offset_cost_per_ton: float = 25.0

    # --- Activity summaries ---
    summary_default_days: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached engine settings."""
    return Settings()
