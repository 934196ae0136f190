"""
Configuration management package.

Domain-specific configuration classes are composed into a root Settings
class loaded from the environment.
"""

from rollout_target.core.config.monitoring import MonitoringConfig
from rollout_target.core.config.server import READ_TIMEOUT_SECONDS, ServerConfig
from rollout_target.core.config.service import ServiceConfig
from rollout_target.core.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "ServerConfig",
    "ServiceConfig",
    "MonitoringConfig",
    "READ_TIMEOUT_SECONDS",
]
