"""Centralized constants for the kintone REST API client.

This module contains constants that are fixed by the remote API or are
internal implementation details, NOT environment-specific configuration.
For environment-specific settings, use `src/core/config.py` instead.

Categories:
- Hosts and paths: Cloud domain suffix, API version paths, resources
- Headers: Authentication header names and content types
- Encoding: Characters left unescaped in query parameters
- Timeouts: Default timeouts for the HTTP transport

Example:
    >>> from src.core.constants import CYBOZU_DOMAIN_SUFFIX
    >>> host = f"example{CYBOZU_DOMAIN_SUFFIX}"
"""

# =============================================================================
# Hosts and Paths
# =============================================================================

CYBOZU_DOMAIN_SUFFIX: str = ".cybozu.com"
"""Suffix appended to a bare subdomain to form the cloud host."""

CUSTOM_DOMAIN_SUFFIX: str = ".com"
"""Subdomains ending with this suffix are used verbatim as the host."""

API_SCHEME: str = "https"
"""Scheme used for every request."""

API_VERSION_PATH: str = "/k/v1"
"""Base path for apps outside a guest space."""

GUEST_API_PATH_TEMPLATE: str = "/k/guest/{guest_id}/v1"
"""Base path for apps inside a guest space."""

RECORDS_RESOURCE: str = "records.json"
"""Bulk records resource, relative to the base path."""


# =============================================================================
# Headers
# =============================================================================

PASSWORD_AUTH_HEADER: str = "X-Cybozu-Authorization"
"""Header carrying base64 encoded `username:password`."""

API_TOKEN_HEADER: str = "X-Cybozu-API-Token"
"""Header carrying a per-app API token."""

JSON_CONTENT_TYPE: str = "application/json"
"""Content type for request bodies."""


# =============================================================================
# Encoding
# =============================================================================

QUERY_SAFE_CHARACTERS: str = "!~*'()"
"""Extra characters left unescaped in the `query` parameter.

Together with `urllib.parse.quote` defaults this matches JavaScript's
encodeURIComponent, which the remote API documentation assumes.
"""


# =============================================================================
# Timeouts
# =============================================================================

KINTONE_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for kintone API calls in seconds."""
