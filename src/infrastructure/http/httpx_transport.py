"""httpx transport adapter.

Implements TransportProtocol with a synchronous httpx.Client. The adapter
issues exactly one request per fetch() call and returns the httpx.Response
untouched. It does not retry, parse bodies or translate errors.

Error behavior:
    - mute_http_exceptions=True: non-2xx responses are returned.
    - mute_http_exceptions=False: raise_for_status() raises
      httpx.HTTPStatusError.
    - Network failures raise httpx.TransportError subclasses
      (ConnectError, TimeoutException, ...) which propagate unchanged.

Implementation intentionally does NOT inherit from TransportProtocol (PEP
544 structural subtyping).
"""

from __future__ import annotations

from types import TracebackType

import httpx
import structlog

from src.core.constants import KINTONE_TIMEOUT_DEFAULT
from src.domain.value_objects import RequestOptions

logger = structlog.get_logger(__name__)


class HttpxTransport:
    """Synchronous HTTP transport backed by httpx.

    Attributes:
        _client: Underlying httpx.Client (connection pool).
        _owns_client: Whether close() should close the client.

    Example:
        >>> with HttpxTransport(timeout=10.0) as transport:
        ...     response = transport.fetch(url, options)
    """

    def __init__(
        self,
        *,
        timeout: float = KINTONE_TIMEOUT_DEFAULT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds (ignored if client is given).
            client: Pre-configured httpx.Client. When given, the caller
                keeps ownership and close() leaves it open.
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def fetch(self, url: str, options: RequestOptions) -> httpx.Response:
        """Issue one request.

        Args:
            url: Absolute URL including the query string.
            options: Request options built by the client.

        Returns:
            httpx.Response: Raw response, whatever its status.

        Raises:
            httpx.TransportError: On network failure.
            httpx.HTTPStatusError: On non-2xx status when
                mute_http_exceptions is False.
        """
        headers = dict(options.headers)
        if options.content_type is not None:
            headers["Content-Type"] = options.content_type

        response = self._client.request(
            method=options.method.value,
            url=url,
            headers=headers,
            content=options.payload.encode("utf-8") if options.payload is not None else None,
        )

        logger.debug(
            "kintone_transport_response",
            method=options.method.value,
            status_code=response.status_code,
        )

        if not options.mute_http_exceptions:
            response.raise_for_status()
        return response

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
