"""
SBG auth: credential value objects for Seven Bridges platform APIs.
"""

from .exceptions import (
    BaseError,
    ErrorCode,
    InvalidTokenFormatError,
    InvalidURLFormatError,
    ValidationError,
)
from .schemas.credential_schemas import (
    AuthCredentials,
    UserPlatformIdentifier,
    UserRecord,
    ensure_valid_token,
    ensure_valid_url,
    get_username,
)
from .schemas.platform_schemas import PLATFORM_LOOKUP_BY_API_URL, PlatformEntry, find_platform

__version__ = "0.1.0"

__all__ = [
    "AuthCredentials",
    "UserPlatformIdentifier",
    "UserRecord",
    "PlatformEntry",
    "PLATFORM_LOOKUP_BY_API_URL",
    "find_platform",
    "ensure_valid_token",
    "ensure_valid_url",
    "get_username",
    "BaseError",
    "ErrorCode",
    "ValidationError",
    "InvalidTokenFormatError",
    "InvalidURLFormatError",
]
