"""
Errors raised by credential checks.

Every error carries an ErrorCode and a status code, and reports itself to
the package logger when it is created.
"""

from enum import Enum
from typing import Any, Optional

from .constants import LogContextKey


class ErrorCode(str, Enum):
    """Error codes; 1xxx are internal failures, 2xxx rejected input."""

    INTERNAL_ERROR = "1000"
    VALIDATION_FAILED = "2000"
    INVALID_FORMAT = "2001"


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of a secret."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


class BaseError(Exception):
    """Base error with an error code, status code and log context."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        **context: Any,
    ):
        """
        Args:
            message: Human-readable error message
            error_code: Code from ErrorCode
            status_code: HTTP-style status for callers that surface errors over an API
            **context: Values added to the log record
        """
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.context = context

        self._log_error()

        super().__init__(message)

    def _log_error(self) -> None:
        # Lazy import, the logger module is loaded after the constants
        from .utils.logger import get_logger

        logger = get_logger()
        extra = {LogContextKey.ERROR_CODE.value: self.error_code.value, **self.context}

        if self.status_code >= 500:
            logger.error(self.message, extra=extra)
        elif self.status_code >= 400:
            logger.warning(self.message, extra=extra)
        else:
            logger.info(self.message, extra=extra)


class ValidationError(BaseError):
    """Input was rejected."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        **context: Any,
    ):
        self.field = field
        if field:
            context[LogContextKey.FIELD.value] = field
        super().__init__(message, error_code=error_code, status_code=400, **context)


class InvalidTokenFormatError(ValidationError):
    """Raised when a token is not 32 lowercase hexadecimal characters."""

    def __init__(self, token: str, message: Optional[str] = None, **context: Any):
        self.value = token
        super().__init__(
            message or f"Given token is not valid: {mask_secret(token)}",
            field="token",
            error_code=ErrorCode.INVALID_FORMAT,
            **context,
        )


class InvalidURLFormatError(ValidationError):
    """Raised when a URL is not an https sbgenomics.com platform URL."""

    def __init__(self, url: str, message: Optional[str] = None, **context: Any):
        self.value = url
        context.setdefault(LogContextKey.PLATFORM_URL.value, url)
        super().__init__(
            message or f"Invalid platform URL: {url}",
            field="url",
            error_code=ErrorCode.INVALID_FORMAT,
            **context,
        )
