"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- HTTP transport (httpx)

Usage:
    from src.core.container import get_logger, get_transport

    logger = get_logger()
    transport = get_transport()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.transport_protocol import TransportProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)


@lru_cache()
def get_transport() -> "TransportProtocol":
    """Return the application-scoped HTTP transport singleton.

    One httpx.Client (and its connection pool) is shared by every client
    built from the container.

    Returns:
        TransportProtocol: HttpxTransport with the configured timeout.
    """
    from src.infrastructure.http.httpx_transport import HttpxTransport

    return HttpxTransport(timeout=get_settings().kintone_timeout)
