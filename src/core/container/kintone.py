"""kintone client factories.

Builds the registry, credentials and ApiClient described by settings.

Usage:
    from src.core.container import get_api_client

    client = get_api_client()
    result = client.search("customers", 'status in ("Open")')
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_logger, get_transport

if TYPE_CHECKING:
    from src.domain.registry import AppRegistry
    from src.domain.value_objects import ClientCredentials
    from src.infrastructure.kintone import ApiClient


def get_client_credentials() -> "ClientCredentials | None":
    """Client-level credentials described by settings.

    Returns:
        ClientCredentials built from KINTONE_USERNAME/KINTONE_PASSWORD, or
        from KINTONE_AUTH, or None to select per-app API tokens.
    """
    from src.domain.value_objects import ClientCredentials

    settings = get_settings()
    if settings.kintone_username and settings.kintone_password is not None:
        return ClientCredentials.from_user_password(
            settings.kintone_username, settings.kintone_password
        )
    if settings.kintone_auth:
        return ClientCredentials.from_encoded(settings.kintone_auth)
    return None


def get_app_registry() -> "AppRegistry":
    """App registry parsed from KINTONE_APPS.

    Raises:
        ValueError: If an entry carries a non-integer id.
    """
    from src.domain.registry import AppRegistry

    return AppRegistry.from_mapping(get_settings().kintone_apps)


@lru_cache()
def get_api_client() -> "ApiClient":
    """Return the application-scoped ApiClient singleton.

    The client shares the container transport, so closing it is left to
    the process (it does not own the transport).

    Returns:
        ApiClient: Client configured from settings.
    """
    from src.infrastructure.kintone import ApiClient

    settings = get_settings()
    credentials = get_client_credentials()
    registry = get_app_registry()
    logger = get_logger().bind(component="kintone_api")

    logger.info(
        "kintone_api_client_configured",
        subdomain=settings.kintone_subdomain,
        app_count=len(registry),
        auth_mode=credentials.source.value if credentials else "api_token",
    )

    return ApiClient(
        settings.kintone_subdomain,
        registry,
        credentials,
        transport=get_transport(),
        logger=logger,
    )
