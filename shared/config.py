"""
Shared configuration management for the CRPT document submitter.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="CRPT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Observability
    metrics_port: Optional[int] = Field(default=None)


class SubmitterConfig(BaseConfig):
    """Document submitter configuration.

    ``time_unit`` and ``request_limit`` are the construction parameters of the
    rate window; ``refill_period`` is how many ``time_unit``s one window spans.
    The target endpoint is fixed and deliberately not configurable.
    """

    service_name: str = Field(default="documents")

    # Rate limiting
    time_unit: str = Field(default="seconds")
    request_limit: int = Field(default=10, gt=0)
    refill_period: int = Field(default=5, gt=0)

    # HTTP transport
    http_timeout: float = Field(default=10.0, gt=0)
    drain_timeout: float = Field(default=5.0, ge=0)


def get_config(**overrides) -> SubmitterConfig:
    """Get configuration for the document submitter."""
    return SubmitterConfig(**overrides)
