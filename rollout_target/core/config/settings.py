"""
Root Settings class composing all domain-specific configurations.

This module provides the main Settings class that brings together the server,
service and monitoring configuration into a single settings object, and the
factory that builds the immutable service identity from it.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

from rollout_target.core.config.monitoring import MonitoringConfig
from rollout_target.core.config.server import ServerConfig
from rollout_target.core.config.service import ServiceConfig
from rollout_target.models.identity import ServiceIdentity
from rollout_target.utils.exceptions import SettingsValidationError


class Settings(BaseSettings):
    """Main settings class composing all domain-specific configurations.

    Settings are read from unprefixed environment variables (``VERSION``,
    ``BEHAVIOR``, ``PORT``, ...) or a ``.env`` file. Flat keyword arguments
    such as ``Settings(behavior="slow", port=9000)`` are routed to the
    matching domain, which keeps tests short.

    Attributes:
        server: Server configuration.
        service: Identity and behavior-injection configuration.
        monitoring: Metrics and logging configuration.
    """

    server: ServerConfig = Field(default_factory=ServerConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    @model_validator(mode="before")
    @classmethod
    def map_flat_fields(cls, values: Any) -> Any:
        """Moves flat keyword arguments into their domain configuration."""
        if not isinstance(values, dict):
            return values

        flat_map = {
            "host": ("server", "host"),
            "port": ("server", "port"),
            "app_name": ("server", "app_name"),
            "version": ("service", "version"),
            "behavior": ("service", "behavior"),
            "hostname": ("service", "hostname"),
            "behavior_seed": ("service", "behavior_seed"),
            "log_level": ("monitoring", "log_level"),
            "enable_metrics": ("monitoring", "enable_metrics"),
        }

        for flat_key, (domain, field) in flat_map.items():
            if flat_key in values:
                value = values.pop(flat_key)
                domain_values = values.setdefault(domain, {})
                if isinstance(domain_values, dict):
                    domain_values[field] = value

        return values

    def identity(self) -> ServiceIdentity:
        """Builds the immutable identity of this process."""
        return ServiceIdentity(
            version=self.service.version,
            behavior=self.service.behavior,
            hostname=self.service.hostname,
        )

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def log_level(self) -> str:
        return self.monitoring.log_level

    class Config:
        """Pydantic configuration options for the Settings class."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        env_ignore_empty = True


@lru_cache
def get_settings() -> Settings:
    """Provides the process-wide settings instance.

    Returns:
        The cached application settings.

    Raises:
        SettingsValidationError: If the environment holds invalid values.
    """
    try:
        return Settings()
    except ValidationError as e:
        errors = [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()]
        raise SettingsValidationError(
            "Invalid service configuration", context={"errors": errors}
        ) from e
