"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every tunable (TTL, debounce, timeout, mock backend) comes from env or .env
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults reproduce the reference dashboard: 5 min cache, 300 ms debounce, 1.0-1.5 s mock latency
"""

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Orchestrator
    cache_ttl_seconds: float = Field(300.0, gt=0)
    refresh_debounce_ms: int = Field(300, ge=0)
    # None disables the fetch timeout
    fetch_timeout_seconds: Annotated[float, Field(gt=0)] | None = 10.0

    # Mock data source
    mock_latency_min_seconds: float = Field(1.0, ge=0)
    mock_latency_max_seconds: float = Field(1.5, ge=0)
    mock_failure_rate: float = Field(0.1, ge=0, le=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_latency_range(self) -> "Settings":
        if self.mock_latency_max_seconds < self.mock_latency_min_seconds:
            raise ValueError("mock_latency_max_seconds must be >= mock_latency_min_seconds")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
