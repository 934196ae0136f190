"""
Standardized error codes for the rollout target service.

Error codes let a deployment controller tell a deliberately injected failure
apart from a genuine fault when it inspects response bodies.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Defines standardized error codes for the application.

    Error Code Ranges:
    - 4000-4099: System and service errors
    - 5000-5099: Configuration errors
    """

    # System and service errors (4000-4099)
    INTERNAL_SERVER_ERROR = "E4001"
    INJECTED_FAILURE = "E4002"

    # Configuration errors (5000-5099)
    SETTINGS_VALIDATION_ERROR = "E5001"
    SERVER_STARTUP_FAILED = "E5002"


class ErrorMessages:
    """Provides human-readable messages for each defined error code."""

    MESSAGES = {
        ErrorCode.INTERNAL_SERVER_ERROR: "An unexpected internal server error occurred.",
        ErrorCode.INJECTED_FAILURE: "Internal Server Error",
        ErrorCode.SETTINGS_VALIDATION_ERROR: "Application settings validation failed. Check environment variables.",
        ErrorCode.SERVER_STARTUP_FAILED: "The HTTP server could not bind or listen on the configured address.",
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode) -> str:
        """Retrieves the message for a given error code.

        Args:
            error_code: The `ErrorCode` for which to retrieve the message.

        Returns:
            The corresponding error message as a string.
        """
        return cls.MESSAGES.get(error_code, "An unknown error occurred.")
