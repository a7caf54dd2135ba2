# ruff: noqa: D107
"""AI service exceptions.

Every AI failure is reported to callers as 503. Messages never contain the
provider error; it is chained with ``raise ... from`` and logged.
"""

from typing import Any

from .base import BaseAppException


class AIServiceError(BaseAppException):
    """Base exception for AI service errors."""

    def __init__(
        self,
        message: str = "AI service error occurred",
        error_code: str = "AI_SERVICE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, 503, error_code, details)


class AIServiceUnavailableError(AIServiceError):
    """Exception raised when AI service is unavailable or returns nothing usable."""

    def __init__(
        self,
        message: str = "AI service is temporarily unavailable",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_SERVICE_UNAVAILABLE", details)


class AIQuotaExceededError(AIServiceError):
    """Exception raised when AI service quota is exceeded."""

    def __init__(
        self,
        message: str = "AI service quota exceeded",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_QUOTA_EXCEEDED", details)


class AITimeoutError(AIServiceError):
    """Exception raised when AI service request times out."""

    def __init__(
        self,
        message: str = "AI service request timed out",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_TIMEOUT", details)


class AIConfigurationError(AIServiceError):
    """Exception raised when AI service is not properly configured."""

    def __init__(
        self,
        message: str = "AI service is not properly configured",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_CONFIGURATION_ERROR", details)


class AIContentFilterError(AIServiceError):
    """Exception raised when content is blocked by AI safety filters."""

    def __init__(
        self,
        message: str = "Content was blocked by AI safety filters",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_CONTENT_FILTERED", details)


class AIRateLimitError(AIServiceError):
    """Exception raised when AI service rate limit is hit."""

    def __init__(
        self,
        message: str = "AI service rate limit exceeded",
        retry_after: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        if details is None:
            details = {}
        if retry_after:
            details["retry_after"] = retry_after
        super().__init__(message, "AI_RATE_LIMITED", details)


class AIGenerationError(AIServiceError):
    """Terminal failure of a generation: retries exhausted or unusable reply."""

    def __init__(
        self,
        message: str = "AI generation failed, please try again later",
        error_code: str = "AI_GENERATION_FAILED",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)


class AIParsingError(AIGenerationError):
    """Exception raised when AI response cannot be parsed."""

    def __init__(
        self,
        message: str = "Failed to parse AI service response",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, "AI_PARSING_ERROR", details)
