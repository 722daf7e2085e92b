"""Endpoint derivation for the kintone REST API.

Pure functions: the same subdomain and guest id always produce the same
base URL, so nothing is cached.

Rules:
    - A subdomain ending in ".com" is a fully qualified custom domain and
      is used verbatim as the host.
    - Any other subdomain gets ".cybozu.com" appended.
    - The scheme is always https.
    - Apps in a guest space use /k/guest/{guest_id}/v1, others /k/v1.

Example:
    >>> derive_endpoint("example")
    Success(value='https://example.cybozu.com/k/v1')
    >>> derive_endpoint("records.example.com", guest_id=7)
    Success(value='https://records.example.com/k/guest/7/v1')
"""

from src.core.constants import (
    API_SCHEME,
    API_VERSION_PATH,
    CUSTOM_DOMAIN_SUFFIX,
    CYBOZU_DOMAIN_SUFFIX,
    GUEST_API_PATH_TEMPLATE,
    RECORDS_RESOURCE,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ConfigurationError


def derive_host(subdomain: str) -> Result[str, ConfigurationError]:
    """Derive the API host from a subdomain.

    Args:
        subdomain: Bare subdomain ("example") or custom domain
            ("records.example.com").

    Returns:
        Success(str): Host name.
        Failure(ConfigurationError): INVALID_SUBDOMAIN if the subdomain is
            empty or contains whitespace or a slash.
    """
    if not subdomain or not subdomain.strip():
        return Failure(
            error=ConfigurationError(
                code=ErrorCode.INVALID_SUBDOMAIN,
                message="Subdomain cannot be empty",
            )
        )
    if "/" in subdomain or any(char.isspace() for char in subdomain):
        return Failure(
            error=ConfigurationError(
                code=ErrorCode.INVALID_SUBDOMAIN,
                message=f"Subdomain '{subdomain}' cannot contain '/' or whitespace",
            )
        )

    if subdomain.endswith(CUSTOM_DOMAIN_SUFFIX):
        return Success(value=subdomain)
    return Success(value=f"{subdomain}{CYBOZU_DOMAIN_SUFFIX}")


def api_base_path(guest_id: int | None = None) -> str:
    """Base path for an app, with or without a guest space segment."""
    if guest_id is not None:
        return GUEST_API_PATH_TEMPLATE.format(guest_id=guest_id)
    return API_VERSION_PATH


def derive_endpoint(
    subdomain: str,
    guest_id: int | None = None,
) -> Result[str, ConfigurationError]:
    """Derive the base resource URL.

    Args:
        subdomain: Bare subdomain or custom domain ending in ".com".
        guest_id: Guest space identifier, if the app lives in one.

    Returns:
        Success(str): e.g. "https://example.cybozu.com/k/guest/7/v1".
        Failure(ConfigurationError): If the subdomain is malformed.
    """
    match derive_host(subdomain):
        case Failure() as failure:
            return failure
        case Success(value=host):
            return Success(value=f"{API_SCHEME}://{host}{api_base_path(guest_id)}")


def records_url(endpoint: str) -> str:
    """URL of the bulk records resource under an endpoint."""
    return f"{endpoint}/{RECORDS_RESOURCE}"
