"""
Core application components.

This package contains configuration, logging, dependency injection, and
lifecycle management.
"""

from rollout_target.core.config import Settings, get_settings
from rollout_target.core.logging import get_logger, setup_structured_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_structured_logging",
]
