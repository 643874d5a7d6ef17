"""
Centralized application configuration.

All settings are driven by environment variables with sensible defaults.
Uses Pydantic BaseSettings for type coercion and ``.env`` loading.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Application ---
    app_name: str = "DevOps Demo"
    app_version: str = "local"  # reported by /health
    log_level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """
    Return a cached Settings instance.

    Environment variables and ``.env`` are read once, before the
    application is built, and the same object is reused afterwards.
    """
    return Settings()
