"""
Structured logging configuration for the rollout target service.

This module provides a centralized setup for structured logging using
`structlog`. Every log entry is rendered as JSON and enriched with the
service identity (version, behavior, hostname) and the correlation ID of the
request being handled, so log lines from canary and stable pods can be told
apart during a rollout.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

# Context variable to hold the correlation ID for the current request context.
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

# Identity fields added to every log entry once logging is configured.
_service_context: Dict[str, str] = {}


def setup_structured_logging(log_level: str = "INFO", identity=None) -> None:
    """Configures structured, JSON-formatted logging for the application.

    Args:
        log_level: The minimum level name to emit (e.g. ``"INFO"``).
        identity: Optional ``ServiceIdentity`` whose fields are attached to
            every log entry.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    _service_context.clear()
    if identity is not None:
        _service_context.update(
            {
                "version": identity.version,
                "behavior": identity.behavior.value,
                "hostname": identity.hostname,
            }
        )

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _add_request_context,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=shared_processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_request_context(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Adds service identity and request context to log entries.

    Args:
        logger: The standard library logger instance.
        method_name: The name of the logging method (e.g., 'info', 'error').
        event_dict: The dictionary representing the log entry to be enriched.

    Returns:
        The enriched log entry dictionary.
    """
    event_dict.setdefault("service", "rollout-target")
    for key, value in _service_context.items():
        event_dict.setdefault(key, value)

    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id

    return event_dict


def log_api_request(logger, method: str, path: str, duration_ms: float, status_code: int) -> None:
    """Logs a standardized message for a completed API request.

    Args:
        logger: The `structlog` logger instance to use.
        method: The HTTP method of the request.
        path: The path of the request.
        duration_ms: The duration of the request in milliseconds.
        status_code: The HTTP status code of the response.
    """
    logger.info(
        "API request completed",
        http_method=method,
        http_path=path,
        http_status=status_code,
        duration_ms=duration_ms,
        request_type="api",
    )


def set_correlation_id(correlation_id: str) -> None:
    """Sets the correlation ID for the current asynchronous context."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Retrieves the correlation ID from the current asynchronous context.

    Returns:
        The current correlation ID, or `None` if it has not been set.
    """
    return correlation_id_var.get()


def generate_correlation_id() -> str:
    """Generates a new, unique correlation ID using UUID version 4."""
    return str(uuid.uuid4())


def clear_correlation_id() -> None:
    """Clears the correlation ID from the current context."""
    correlation_id_var.set(None)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Retrieves a `structlog` logger instance.

    Args:
        name: The name of the logger, typically the module's `__name__`.

    Returns:
        A configured `structlog` logger instance.
    """
    return structlog.get_logger(name)
