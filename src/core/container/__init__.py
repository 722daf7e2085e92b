"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_api_client, get_logger

The container is organized into modules:
- infrastructure: Core services (logging, HTTP transport)
- kintone: Registry, credentials and ApiClient factories
"""

from src.core.container.infrastructure import get_logger, get_transport
from src.core.container.kintone import (
    get_api_client,
    get_app_registry,
    get_client_credentials,
)

__all__ = [
    "get_api_client",
    "get_app_registry",
    "get_client_credentials",
    "get_logger",
    "get_transport",
]
