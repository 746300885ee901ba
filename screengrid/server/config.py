# screengrid/server/config.py
"""Service configuration with sensible defaults for LAN use."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, overridable via environment variables."""

    # Caches
    LAYOUT_CACHE_MAX: int = 256

    # Sequences
    SEQUENCE_DEFAULT_LENGTH: int = 70
    SEQUENCE_MAX_LENGTH: int = 200

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8091
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SCREENGRID_", env_file=".env", extra="ignore")


settings = Settings()
