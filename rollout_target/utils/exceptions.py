"""
Custom exception hierarchy for the rollout target service.

These exceptions map directly to HTTP error responses. Injected failures are
modelled as exceptions too, so they travel through the same handler and
metrics path as genuine errors and are always counted with their real status.
"""

from typing import Any, Optional

from rollout_target.utils.error_codes import ErrorCode, ErrorMessages


class ServiceError(Exception):
    """The base exception class for all custom exceptions in this service.

    Attributes:
        status_code: The default HTTP status code for this type of error.
        code: A string-based error code for programmatic identification.
        context: Optional additional information about the error.
    """

    status_code: int = 500

    def __init__(self, message: str, code: str = "E0000", context: Optional[Any] = None):
        """Initializes the ServiceError.

        Args:
            message: A human-readable message describing the error.
            code: A unique, machine-readable code for the error.
            context: An optional dictionary for providing extra context.
        """
        super().__init__(message)
        self.code = code
        self.context = context


class InjectedFailureError(ServiceError):
    """Raised when the behavior engine decides a request must fail.

    The status code is taken from the behavior decision rather than fixed on
    the class, so the response always reports what the engine decided.
    """

    def __init__(self, status_code: int = 500, context: Optional[Any] = None):
        """Initializes the InjectedFailureError.

        Args:
            status_code: The HTTP status decided by the behavior engine.
            context: Identity of the instance that injected the failure.
        """
        super().__init__(
            ErrorMessages.get_message(ErrorCode.INJECTED_FAILURE),
            code=ErrorCode.INJECTED_FAILURE.value,
            context=context,
        )
        self.status_code = status_code


# --- Configuration exceptions ---


class ConfigurationError(ServiceError):
    """Base class for all configuration-related errors.

    Configuration errors are raised at startup and are fatal: the process
    exits with a non-zero status instead of serving traffic.
    """

    status_code = 500


class SettingsValidationError(ConfigurationError):
    """Raised when application settings validation fails."""

    def __init__(self, message: str, context: Optional[Any] = None):
        """Initializes the SettingsValidationError.

        Args:
            message: Description of the settings validation issue.
            context: Optional additional context about the error.
        """
        super().__init__(message, code=ErrorCode.SETTINGS_VALIDATION_ERROR.value, context=context)


class ServerStartupError(ConfigurationError):
    """Raised when the HTTP server cannot bind or listen."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.SERVER_STARTUP_FAILED.value, context=context)
