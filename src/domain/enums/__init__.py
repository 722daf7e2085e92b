"""Domain enums.

Available Enums:
    - CredentialSource: How client-level credentials were supplied
    - HttpMethod: HTTP methods used by request descriptors
"""

from src.domain.enums.credential_source import CredentialSource
from src.domain.enums.http_method import HttpMethod

__all__ = [
    "CredentialSource",
    "HttpMethod",
]
