"""Client-level basic-auth credentials value object.

A client either holds one of these (password authentication, applied to
every app uniformly) or holds nothing and falls back to per-app API tokens.
The two ways of supplying credentials are explicit named constructors, and
both produce the same encoded value for equivalent input.

Usage:
    from src.domain.value_objects import ClientCredentials

    creds = ClientCredentials.from_user_password("alice", "s3cret")
    same = ClientCredentials.from_encoded("YWxpY2U6czNjcmV0")
    assert creds == same
"""

import base64
from dataclasses import dataclass, field

from src.domain.enums import CredentialSource


@dataclass(frozen=True)
class ClientCredentials:
    """Reusable encoded basic-auth value.

    Attributes:
        encoded: base64 of UTF-8 `username:password`, sent verbatim in the
            X-Cybozu-Authorization header.
        source: How the value was supplied. Excluded from equality.

    Security:
        The encoded value is trivially reversible. It is excluded from
        repr and str.
    """

    encoded: str
    source: CredentialSource = field(default=CredentialSource.ENCODED, compare=False)

    def __post_init__(self) -> None:
        """Validate credentials after initialization.

        Raises:
            ValueError: If encoded is empty or not a string.
        """
        if not isinstance(self.encoded, str):
            raise ValueError("encoded credentials must be a string")
        if not self.encoded.strip():
            raise ValueError("encoded credentials cannot be empty")

    @classmethod
    def from_user_password(cls, username: str, password: str) -> "ClientCredentials":
        """Encode a username and password once.

        Args:
            username: Login name.
            password: Login password.

        Returns:
            ClientCredentials: Credentials tagged USER_PASSWORD.

        Raises:
            ValueError: If username is empty.
        """
        if not username:
            raise ValueError("username cannot be empty")
        raw = f"{username}:{password}".encode("utf-8")
        return cls(
            encoded=base64.b64encode(raw).decode("ascii"),
            source=CredentialSource.USER_PASSWORD,
        )

    @classmethod
    def from_encoded(cls, encoded: str) -> "ClientCredentials":
        """Wrap an already encoded basic-auth value, stored verbatim.

        Args:
            encoded: base64 of `username:password`.

        Returns:
            ClientCredentials: Credentials tagged ENCODED.
        """
        return cls(encoded=encoded, source=CredentialSource.ENCODED)

    def __repr__(self) -> str:
        """Return repr without the encoded value."""
        return f"ClientCredentials(source={self.source.value}, encoded=<redacted>)"

    def __str__(self) -> str:
        """Return string representation without the encoded value."""
        return f"ClientCredentials({self.source.value})"
