"""HTTP transport adapters."""

from src.infrastructure.http.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
