"""
Configuration for credential handling.

Values come from the environment when the configuration is first read and
can be replaced at runtime with ``set_config``.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

from .constants import VALIDATE_ON_CREATE_ENV


class ValidationConfig(BaseModel):
    """Credential validation behavior."""

    validate_on_create: bool = Field(
        default_factory=lambda: os.getenv(VALIDATE_ON_CREATE_ENV, "false").lower() == "true",
        description="Reject malformed URLs and tokens when credentials are constructed",
    )


_config: Optional[ValidationConfig] = None


def get_config() -> ValidationConfig:
    """Get the process-wide validation configuration."""
    global _config
    if _config is None:
        _config = ValidationConfig()
    return _config


def set_config(config: ValidationConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Forget the current configuration; the next read goes back to the environment."""
    global _config
    _config = None
