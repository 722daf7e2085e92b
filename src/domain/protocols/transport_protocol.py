"""TransportProtocol definition for issuing HTTP requests.

The client builds request descriptors; a transport executes them. The
transport owns networking concerns (connection pooling, timeouts, TLS)
and returns whatever raw response object it produces. The client never
inspects that object.

Error contract:
    - Non-2xx responses are returned, not raised, when
      `options.mute_http_exceptions` is True.
    - Network failures (DNS, connection, timeout) are raised by the
      transport and propagate to the caller unchanged.

Usage:
    from src.domain.protocols import TransportProtocol

    class RecordingTransport:
        def fetch(self, url: str, options: RequestOptions) -> Any:
            ...
"""

from typing import Any, Protocol

from src.domain.value_objects import RequestOptions


class TransportProtocol(Protocol):
    """Protocol for HTTP transports.

    Implementations must be safe to call concurrently if the client is
    shared between threads; the client itself holds no mutable state.
    """

    def fetch(self, url: str, options: RequestOptions) -> Any:
        """Issue one request and return the raw response.

        Args:
            url: Absolute URL including the query string.
            options: Method, headers, content type, payload and the
                mute_http_exceptions flag.

        Returns:
            The transport's raw response object (opaque to the client).
        """
        ...
