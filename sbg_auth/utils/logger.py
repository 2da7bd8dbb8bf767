"""
Package logger.

Records go to the ``sbg_auth`` logger; the host application owns its level
and handlers. Credential context passed as ``extra`` is kept on the record
and also rendered into the message as ``msg | key=value``.
"""

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "sbg_auth"


class CredentialLogAdapter(logging.LoggerAdapter):
    """Appends the ``extra`` mapping of each call to its message."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        if extra:
            msg = f"{msg} | " + " | ".join(f"{k}={v}" for k, v in extra.items())
        return msg, kwargs


def get_logger(name: Optional[str] = None) -> CredentialLogAdapter:
    """
    Get the package logger, or a child of it.

    Args:
        name: Optional child name, giving ``sbg_auth.<name>``

    Returns:
        Adapter around the standard library logger
    """
    logger_name = f"{PACKAGE_LOGGER_NAME}.{name}" if name else PACKAGE_LOGGER_NAME
    return CredentialLogAdapter(logging.getLogger(logger_name), {})
