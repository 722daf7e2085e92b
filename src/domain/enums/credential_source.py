"""How client-level credentials were supplied.

Usage:
    from src.domain.enums import CredentialSource

    if credentials.source == CredentialSource.USER_PASSWORD:
        ...
"""

from enum import Enum


class CredentialSource(str, Enum):
    """Origin of a client-level basic-auth value.

    String Enum:
        Inherits from str for easy serialization and logging.
    """

    USER_PASSWORD = "user_password"
    """Encoded by the client from a username and password."""

    ENCODED = "encoded"
    """Supplied already base64 encoded by the caller."""
