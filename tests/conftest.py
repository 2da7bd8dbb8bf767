"""
Shared fixtures for SBG auth tests.

Provides configuration isolation and standard credential test data.
"""

import pytest

from sbg_auth.config import reset_config
from sbg_auth.schemas.credential_schemas import AuthCredentials, UserRecord


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Give every test a fresh configuration."""
    monkeypatch.delenv("SBG_AUTH_VALIDATE_ON_CREATE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def valid_token() -> str:
    """Standard well-formed developer token."""
    return "550e8400e29b41d4a716446655440000"


@pytest.fixture
def other_token() -> str:
    """Second well-formed developer token."""
    return "0123456789abcdef0123456789abcdef"


@pytest.fixture
def sbg_url() -> str:
    """Default Seven Bridges API URL."""
    return "https://api.sbgenomics.com"


@pytest.fixture
def alice() -> UserRecord:
    """User record for alice."""
    return UserRecord(username="alice", email="alice@example.com")


@pytest.fixture
def bob() -> UserRecord:
    """User record for bob."""
    return UserRecord(username="bob")


@pytest.fixture
def alice_credentials(sbg_url, valid_token, alice) -> AuthCredentials:
    """Credentials of alice on the default platform."""
    return AuthCredentials(sbg_url, valid_token, alice)
