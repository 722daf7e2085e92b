"""Request descriptor value objects.

A RequestDescriptor is everything the transport needs to issue one call:
the full URL (query string included) and the RequestOptions. The client
builds descriptors; the transport executes them.
"""

from dataclasses import dataclass, field

from src.domain.enums import HttpMethod


@dataclass(frozen=True)
class RequestOptions:
    """Options passed to the transport alongside the URL.

    Attributes:
        method: HTTP method.
        headers: Extra request headers (authentication).
        content_type: Content-Type of the payload, when there is one.
        payload: Raw request body (JSON text), when there is one.
        mute_http_exceptions: When True the transport returns non-2xx
            responses instead of raising.
    """

    method: HttpMethod
    headers: dict[str, str] = field(default_factory=dict)
    content_type: str | None = None
    payload: str | None = None
    mute_http_exceptions: bool = True


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully built request.

    Attributes:
        url: Absolute URL including any query string.
        options: Transport options.
    """

    url: str
    options: RequestOptions

    @property
    def method(self) -> HttpMethod:
        """HTTP method of the request."""
        return self.options.method
