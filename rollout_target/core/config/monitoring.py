"""Monitoring and logging configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class MonitoringConfig(BaseSettings):
    """Metrics and logging configuration.

    Attributes:
        log_level: Logging level.
        enable_metrics: Expose the Prometheus scrape endpoint.
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    enable_metrics: bool = Field(default=True, description="Expose /metrics")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return str(value).upper() if value is not None else value

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        env_ignore_empty = True
