"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``TEMPLATE_DIGESTOR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_DIGESTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Digesting
    hash_algorithm: str = "md5"
    detect_cycles: bool = True

    # Template lookup
    template_root: Path = Path("templates")
    default_format: str = "html"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
