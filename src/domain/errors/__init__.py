"""Domain errors package.

Usage:
    from src.domain.errors import ConfigurationError, AuthenticationError
"""

from src.domain.errors.kintone_error import (
    AuthenticationError,
    ConfigurationError,
    KintoneError,
)

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "KintoneError",
]
