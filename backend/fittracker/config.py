"""
Fitness Tracker Configuration
=============================
All environment variables in one place. Pydantic Settings validates
types at startup so misconfigurations fail fast.

Formula coefficients are deliberately absent: they live in
``fittracker.services.metrics.FormulaConstants`` and are not runtime settings.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Loaded from environment variables or a .env file."""

    # --- App settings ---
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:8000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
