from .logger import CredentialLogAdapter, get_logger

__all__ = ["CredentialLogAdapter", "get_logger"]
