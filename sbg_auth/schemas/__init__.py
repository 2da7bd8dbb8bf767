from .credential_schemas import (
    AuthCredentials,
    UserPlatformIdentifier,
    UserRecord,
    ensure_valid_token,
    ensure_valid_url,
    get_username,
)
from .platform_schemas import PLATFORM_LOOKUP_BY_API_URL, PlatformEntry, find_platform

__all__ = [
    "AuthCredentials",
    "UserPlatformIdentifier",
    "UserRecord",
    "ensure_valid_token",
    "ensure_valid_url",
    "get_username",
    "PLATFORM_LOOKUP_BY_API_URL",
    "PlatformEntry",
    "find_platform",
]
