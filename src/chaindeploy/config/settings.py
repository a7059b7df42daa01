"""
Application settings using Pydantic.

Provides environment-based configuration loading with CHAINDEPLOY_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Registry (address manager) to reuse; a new one is deployed when unset
    registry_address: str | None = None

    # Restrict a run to these contract names (JSON list in the environment)
    dependencies: list[str] | None = None

    # Transaction defaults applied when the deploy file sets no overrides
    default_gas_limit: int | None = None
    default_gas_price: int | None = None

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "CHAINDEPLOY_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
