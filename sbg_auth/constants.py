"""
Constants for the SBG auth package.

Credential format patterns, the offsets of the subdomain slice, and the
names used in log context and configuration.
"""

from enum import Enum

# Credential format patterns
URL_VALIDATION_REGEXP = r"^(https://)(.+)(\.sbgenomics\.com)$"
TOKEN_VALIDATION_REGEXP = r"^[0-9a-f]{8}[0-9a-f]{4}[0-9a-f]{4}[0-9a-f]{4}[0-9a-f]{12}$"

# Fixed offsets used to slice the subdomain out of an API URL
URL_SCHEME_PREFIX_LENGTH = len("https://")
URL_DOMAIN_SUFFIX_LENGTH = len(".sbgenomics.com")

# Staging hostnames carry an internal environment suffix after the first dot
STAGING_SUBDOMAIN_MARKER = "vayu"

VALIDATE_ON_CREATE_ENV = "SBG_AUTH_VALIDATE_ON_CREATE"


class LogContextKey(str, Enum):
    """Keys of the credential context attached to log records."""

    CREDENTIAL_ID = "credential_id"
    PLATFORM_URL = "platform_url"
    USERNAME = "username"
    FIELD = "field"
    ERROR_CODE = "error_code"


class PlatformProperty(str, Enum):
    """Attributes of a registered platform entry."""

    NAME = "name"
    SHORT_NAME = "short_name"
    DEV_TOKEN_URL = "dev_token_url"
