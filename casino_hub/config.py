"""Centralized configuration via pydantic-settings.

Ports, origins, and logging knobs live here.
Override any value via environment variable (e.g., ``PORT=8000``).
"""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- API ---
    PORT: int = 5000
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    # --- Client ---
    API_BASE_URL: str = "http://localhost:5000"
    CLIENT_PORT: int = 3000
    CLIENT_TIMEOUT_SECONDS: float = 10.0  # single fetch of /api/content

    # --- Observability ---
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    VERSION: str = "0.1.0"

    model_config = {"env_prefix": "", "case_sensitive": True}

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case; store the canonical upper-case level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL {v!r} is not a logging level")
        return level

    @model_validator(mode="after")
    def validate_origins(self) -> "Settings":
        """CORS needs at least one origin to allow."""
        if not self.ALLOWED_ORIGINS:
            raise ValueError("ALLOWED_ORIGINS must name at least one origin")
        return self

    @model_validator(mode="after")
    def validate_client_timeout(self) -> "Settings":
        if self.CLIENT_TIMEOUT_SECONDS <= 0:
            raise ValueError(
                f"CLIENT_TIMEOUT_SECONDS ({self.CLIENT_TIMEOUT_SECONDS}) must be positive"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
