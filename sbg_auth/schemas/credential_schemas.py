"""
Pydantic schemas for platform authentication credentials.

An AuthCredentials instance pairs a platform API URL with a developer token
and the user the token belongs to. Identity is derived from the platform
subdomain and the username, so two credentials for the same user on the same
platform compare equal even when their tokens differ.
"""

import re
from typing import Any, ClassVar, Mapping, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..config import get_config
from ..constants import (
    STAGING_SUBDOMAIN_MARKER,
    TOKEN_VALIDATION_REGEXP,
    URL_DOMAIN_SUFFIX_LENGTH,
    URL_SCHEME_PREFIX_LENGTH,
    URL_VALIDATION_REGEXP,
    LogContextKey,
    PlatformProperty,
)
from ..exceptions import InvalidTokenFormatError, InvalidURLFormatError, mask_secret
from ..utils.logger import get_logger
from .platform_schemas import PLATFORM_LOOKUP_BY_API_URL, PlatformEntry, find_platform

_URL_PATTERN = re.compile(URL_VALIDATION_REGEXP)
_TOKEN_PATTERN = re.compile(TOKEN_VALIDATION_REGEXP)


class UserRecord(BaseModel):
    """User account as returned by the platform; only the username is read."""

    model_config = ConfigDict(extra="allow")

    username: str = Field(..., description="Platform username")


@runtime_checkable
class UserPlatformIdentifier(Protocol):
    """Anything that names a user on a platform together with a token."""

    url: str
    token: str
    user: Any


IdentifierLike = Union[UserPlatformIdentifier, Mapping[str, Any]]


def get_username(user: Any) -> Optional[str]:
    """Read ``username`` from a mapping or from an attribute."""
    if isinstance(user, Mapping):
        return user.get("username")
    return getattr(user, "username", None)


def ensure_valid_token(token: Optional[str], **context: Any) -> None:
    """
    Check a developer token format.

    Args:
        token: Token to check
        **context: Extra values logged with the error

    Raises:
        InvalidTokenFormatError: If the token is not 32 lowercase hex characters
    """
    if not AuthCredentials.is_valid_token(token):
        raise InvalidTokenFormatError(token, **context)


def ensure_valid_url(url: Optional[str], **context: Any) -> None:
    """
    Check a platform API URL format.

    Raises:
        InvalidURLFormatError: If the URL is not an https sbgenomics.com URL
    """
    if not AuthCredentials.is_valid_url(url):
        raise InvalidURLFormatError(url, **context)


class AuthCredentials(BaseModel):
    """Credentials of a user on one platform."""

    model_config = ConfigDict(validate_assignment=True)

    platform_lookup_by_api_url: ClassVar[Mapping[str, PlatformEntry]] = PLATFORM_LOOKUP_BY_API_URL

    url: str = Field(..., description="Platform API base URL")
    token: Optional[str] = Field(..., description="Developer token")
    user: Any = Field(..., description="User record the token belongs to, stored as given")

    _id: str = PrivateAttr(default="")

    def __init__(self, url: str, token: Optional[str], user: Any, **data: Any):
        super().__init__(url=url, token=token, user=user, **data)

    def model_post_init(self, __context: Any) -> None:
        self._id = self.get_hash()
        if get_config().validate_on_create:
            self.ensure_valid()

    @property
    def username(self) -> Optional[str]:
        return get_username(self.user)

    @property
    def id(self) -> str:
        """Identity hash captured when the credentials were created."""
        return self._id

    # ==================== FORMAT CHECKS ====================

    @staticmethod
    def is_valid_token(token: Optional[str]) -> bool:
        return isinstance(token, str) and _TOKEN_PATTERN.fullmatch(token) is not None

    @staticmethod
    def is_valid_url(url: Optional[str]) -> bool:
        return isinstance(url, str) and _URL_PATTERN.fullmatch(url) is not None

    # ==================== PLATFORM LOOKUP ====================

    @staticmethod
    def get_subdomain(url: str) -> str:
        """
        Slice the subdomain out of an API URL.

        The slice assumes an ``https://`` prefix and a ``.sbgenomics.com``
        suffix. URLs on other domains give a meaningless substring rather
        than an error.
        """
        return url[URL_SCHEME_PREFIX_LENGTH : len(url) - URL_DOMAIN_SUFFIX_LENGTH]

    @staticmethod
    def find_platform(url: Optional[str]) -> Optional[PlatformEntry]:
        return find_platform(url)

    @classmethod
    def get_platform_property_value(
        cls, url: str, prop: Union[PlatformProperty, str]
    ) -> str:
        """
        Read a property of the platform registered under ``url``.

        Unregistered URLs fall back to their subdomain. Staging ("vayu")
        subdomains are cut at the first dot.

        Args:
            url: Platform API URL
            prop: One of the PlatformProperty values

        Returns:
            The registered value or the subdomain fallback
        """
        platform = cls.platform_lookup_by_api_url.get(url)
        if platform is not None:
            return getattr(platform, PlatformProperty(prop).value)

        subdomain = cls.get_subdomain(url)
        if STAGING_SUBDOMAIN_MARKER not in subdomain:
            return subdomain
        return subdomain.split(".")[0]

    @classmethod
    def get_platform_short_name(cls, url: str) -> str:
        return cls.get_platform_property_value(url, PlatformProperty.SHORT_NAME)

    @classmethod
    def get_platform_label(cls, url: str) -> str:
        return cls.get_platform_property_value(url, PlatformProperty.NAME)

    @classmethod
    def get_dev_token_url(cls, url: str) -> Optional[str]:
        """Developer token page of a registered platform, None otherwise."""
        platform = cls.platform_lookup_by_api_url.get(url)
        return platform.dev_token_url if platform is not None else None

    # ==================== CONSTRUCTION & COMPARISON ====================

    @classmethod
    def from_identifier(
        cls, identifier: Optional[IdentifierLike] = None
    ) -> Optional["AuthCredentials"]:
        """
        Build credentials from anything carrying url, token and user.

        Values are passed through unchecked; an absent field becomes None.

        Args:
            identifier: An object or mapping with ``url``, ``token`` and ``user``

        Returns:
            New AuthCredentials, or None when no identifier is given
        """
        if identifier is None:
            return None

        if isinstance(identifier, Mapping):
            return cls(identifier.get("url"), identifier.get("token"), identifier.get("user"))
        return cls(
            getattr(identifier, "url", None),
            getattr(identifier, "token", None),
            getattr(identifier, "user", None),
        )

    @staticmethod
    def is_similar(
        x: Optional["AuthCredentials"] = None, y: Optional["AuthCredentials"] = None
    ) -> bool:
        """
        Check whether a pair of credentials belong to the same user.

        Unlike ``equals``, either side may be None. Two missing credentials
        are similar; one missing credential is not similar to a present one.
        """
        if x is None and y is None:
            return True
        if x is None or y is None:
            return False
        return x.equals(y)

    def get_hash(self) -> str:
        """Live identity hash, ``<subdomain>_<username>``."""
        return f"{self.get_subdomain(self.url)}_{self.username}"

    def equals(self, other: Optional["AuthCredentials"]) -> bool:
        """
        Check whether other credentials are for the same user on the same platform.

        Tokens are not compared.
        """
        if other is None:
            return False
        return self.get_hash() == other.get_hash()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthCredentials):
            return NotImplemented
        return self.equals(other)

    def update_to_match(self, other: "AuthCredentials") -> None:
        """
        Copy url, token and user from ``other`` in place.

        ``id`` keeps the value computed at construction.
        """
        self.url = other.url
        self.token = other.token
        self.user = other.user

        get_logger().debug(
            "Credentials updated",
            extra={
                LogContextKey.CREDENTIAL_ID.value: self.id,
                LogContextKey.PLATFORM_URL.value: self.url,
                LogContextKey.USERNAME.value: self.username,
            },
        )

    # ==================== VALIDATION & SERIALIZATION ====================

    def ensure_valid(self) -> None:
        """
        Validate url and token formats.

        Raises:
            InvalidURLFormatError: If the URL is malformed
            InvalidTokenFormatError: If the token is malformed
        """
        context = {
            LogContextKey.CREDENTIAL_ID.value: self.id,
            LogContextKey.USERNAME.value: self.username,
        }
        ensure_valid_url(self.url, **context)
        ensure_valid_token(self.token, **context)

    def to_identifier(self) -> dict:
        """Plain mapping accepted by ``from_identifier``."""
        return {"url": self.url, "token": self.token, "user": self.user}

    def __repr_args__(self):
        yield "id", self.id
        yield "url", self.url
        yield "token", mask_secret(self.token)
        yield "user", self.username
