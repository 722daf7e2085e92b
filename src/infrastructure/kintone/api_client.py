"""kintone REST API client for bulk record operations.

Builds request descriptors for the records.json resource and hands them to
a transport. Every operation follows the same steps:

    1. Resolve the app in the registry (ConfigurationError if unknown)
    2. Derive the endpoint for the app (guest space aware)
    3. Select the authentication header (AuthenticationError if none)
    4. Build the method-specific request descriptor
    5. Call the transport and return its raw response unmodified

Endpoints:
    POST   /records.json - Create records
    GET    /records.json - Search records (query, totalCount)
    PUT    /records.json - Update records
    DELETE /records.json - Delete records by id

Architecture:
    - Infrastructure layer (adapter for the remote API)
    - Returns Result types for configuration/credential failures
    - Transport exceptions propagate unchanged
    - Non-2xx responses are returned as Success(response); interpreting
      them is the caller's job

Reference:
    - https://cybozu.dev/ja/kintone/docs/rest-api/records/
"""

import json
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any
from urllib.parse import quote

import structlog

from src.core.constants import JSON_CONTENT_TYPE, QUERY_SAFE_CHARACTERS
from src.core.result import Failure, Result, Success
from src.domain.enums import HttpMethod
from src.domain.errors import KintoneError
from src.domain.protocols import LoggerProtocol, TransportProtocol
from src.domain.registry import AppRegistry
from src.domain.value_objects import (
    AppConfig,
    ClientCredentials,
    RequestDescriptor,
    RequestOptions,
)
from src.infrastructure.http.httpx_transport import HttpxTransport
from src.infrastructure.kintone.auth import select_auth_header
from src.infrastructure.kintone.endpoint import derive_endpoint, records_url

type Record = Mapping[str, Any]
type RecordId = int | str


class ApiClient:
    """Client for kintone bulk record operations.

    Holds only immutable construction-time state (subdomain, registry,
    credentials), so one instance may be shared by concurrent callers as
    long as the transport is concurrency-safe.

    Attributes:
        subdomain: Subdomain or custom domain ending in ".com".
        apps: App registry.
        credentials: Client-level credentials, or None for token-only mode.

    Example:
        >>> client = ApiClient.with_password(
        ...     "example",
        ...     {"customers": {"appId": 12}},
        ...     "alice",
        ...     "s3cret",
        ... )
        >>> result = client.search("customers", 'name = "Alice"')
    """

    def __init__(
        self,
        subdomain: str,
        apps: AppRegistry | Mapping[str, Any],
        credentials: ClientCredentials | None = None,
        *,
        transport: TransportProtocol | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the client. No network I/O, no subdomain validation.

        Args:
            subdomain: Bare subdomain ("example") or custom domain.
            apps: AppRegistry, or a plain mapping passed to
                AppRegistry.from_mapping().
            credentials: Client-level credentials. When set they are used
                for every app, even apps that carry an API token.
            transport: Transport used to issue requests. Defaults to an
                HttpxTransport owned (and closed) by this client.
            logger: Structured logger. Defaults to a structlog logger.
        """
        self._subdomain = subdomain
        self._apps = apps if isinstance(apps, AppRegistry) else AppRegistry.from_mapping(apps)
        self._credentials = credentials

        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()
        self._logger = logger or structlog.get_logger("kintone_api")

    # --- Named constructors ---

    @classmethod
    def with_password(
        cls,
        subdomain: str,
        apps: AppRegistry | Mapping[str, Any],
        username: str,
        password: str,
        **kwargs: Any,
    ) -> "ApiClient":
        """Create a client that authenticates every app with a password.

        The basic-auth value is encoded once, here.
        """
        return cls(
            subdomain,
            apps,
            ClientCredentials.from_user_password(username, password),
            **kwargs,
        )

    @classmethod
    def with_encoded_credentials(
        cls,
        subdomain: str,
        apps: AppRegistry | Mapping[str, Any],
        encoded: str,
        **kwargs: Any,
    ) -> "ApiClient":
        """Create a client from a pre-encoded basic-auth value (stored verbatim)."""
        return cls(subdomain, apps, ClientCredentials.from_encoded(encoded), **kwargs)

    @classmethod
    def with_api_tokens(
        cls,
        subdomain: str,
        apps: AppRegistry | Mapping[str, Any],
        **kwargs: Any,
    ) -> "ApiClient":
        """Create a token-only client; each app must carry its own API token."""
        return cls(subdomain, apps, None, **kwargs)

    @property
    def subdomain(self) -> str:
        return self._subdomain

    @property
    def apps(self) -> AppRegistry:
        return self._apps

    @property
    def credentials(self) -> ClientCredentials | None:
        return self._credentials

    # --- Request building ---

    def endpoint_for(self, app_name: str) -> Result[str, KintoneError]:
        """Base resource URL for a registered app.

        Args:
            app_name: Registry name of the app.

        Returns:
            Success(str): e.g. "https://example.cybozu.com/k/v1".
            Failure(ConfigurationError): Unknown app or malformed subdomain.
        """
        app_result = self._apps.get(app_name)
        if isinstance(app_result, Failure):
            return app_result
        return derive_endpoint(self._subdomain, app_result.value.guest_id)

    def _resolve(
        self, app_name: str
    ) -> Result[tuple[AppConfig, str, dict[str, str]], KintoneError]:
        """Resolve app, endpoint and auth header for one call."""
        app_result = self._apps.get(app_name)
        if isinstance(app_result, Failure):
            return app_result
        app = app_result.value

        endpoint_result = derive_endpoint(self._subdomain, app.guest_id)
        if isinstance(endpoint_result, Failure):
            return Failure(error=_with_app_name(endpoint_result.error, app_name))

        auth_result = select_auth_header(app, self._credentials, app_name=app_name)
        if isinstance(auth_result, Failure):
            return auth_result

        return Success(value=(app, endpoint_result.value, auth_result.value))

    def _build_json_request(
        self,
        method: HttpMethod,
        app_name: str,
        records: Sequence[Record],
    ) -> Result[RequestDescriptor, KintoneError]:
        resolved = self._resolve(app_name)
        if isinstance(resolved, Failure):
            return resolved
        app, endpoint, auth_header = resolved.value

        payload = json.dumps({"app": app.app_id, "records": list(records)}, ensure_ascii=False)
        return Success(
            value=RequestDescriptor(
                url=records_url(endpoint),
                options=RequestOptions(
                    method=method,
                    headers=auth_header,
                    content_type=JSON_CONTENT_TYPE,
                    payload=payload,
                ),
            )
        )

    def build_create_request(
        self, app_name: str, records: Sequence[Record]
    ) -> Result[RequestDescriptor, KintoneError]:
        """Build the POST descriptor that creates records.

        Body: {"app": <app id>, "records": [...]}.
        """
        return self._build_json_request(HttpMethod.POST, app_name, records)

    def build_update_request(
        self, app_name: str, records: Sequence[Record]
    ) -> Result[RequestDescriptor, KintoneError]:
        """Build the PUT descriptor that updates records.

        Each record is an update instruction as the remote API defines it
        (e.g. {"id": 1, "record": {...}}); it is passed through untouched.
        """
        return self._build_json_request(HttpMethod.PUT, app_name, records)

    def build_search_request(
        self, app_name: str, query: str
    ) -> Result[RequestDescriptor, KintoneError]:
        """Build the GET descriptor that searches records.

        Query string: app=<id>&query=<percent-encoded query>&totalCount=true.
        Only the query value is encoded.
        """
        resolved = self._resolve(app_name)
        if isinstance(resolved, Failure):
            return resolved
        app, endpoint, auth_header = resolved.value

        encoded_query = quote(query, safe=QUERY_SAFE_CHARACTERS)
        url = f"{records_url(endpoint)}?app={app.app_id}&query={encoded_query}&totalCount=true"
        return Success(
            value=RequestDescriptor(
                url=url,
                options=RequestOptions(method=HttpMethod.GET, headers=auth_header),
            )
        )

    def build_destroy_request(
        self, app_name: str, record_ids: Sequence[RecordId]
    ) -> Result[RequestDescriptor, KintoneError]:
        """Build the DELETE descriptor that deletes records by id.

        Query string: app=<id>&ids[0]=<id0>&ids[1]=<id1>..., zero-based and
        in input order.
        """
        resolved = self._resolve(app_name)
        if isinstance(resolved, Failure):
            return resolved
        app, endpoint, auth_header = resolved.value

        params = [f"app={app.app_id}"]
        params.extend(f"ids[{index}]={record_id}" for index, record_id in enumerate(record_ids))
        return Success(
            value=RequestDescriptor(
                url=f"{records_url(endpoint)}?{'&'.join(params)}",
                options=RequestOptions(method=HttpMethod.DELETE, headers=auth_header),
            )
        )

    # --- Record operations ---

    def create(self, app_name: str, records: Sequence[Record]) -> Result[Any, KintoneError]:
        """Create records in an app.

        Args:
            app_name: Registry name of the app.
            records: Records as field-code -> {"value": ...} mappings.

        Returns:
            Success(response): Raw transport response, whatever its status.
            Failure(KintoneError): The request could not be built.

        Raises:
            Whatever the transport raises on network failure.
        """
        return self._send("create", app_name, self.build_create_request(app_name, records))

    def search(self, app_name: str, query: str) -> Result[Any, KintoneError]:
        """Search records in an app with a kintone query string.

        Args:
            app_name: Registry name of the app.
            query: Query such as 'name = "Alice" order by $id desc'.

        Returns:
            Success(response): Raw transport response, whatever its status.
            Failure(KintoneError): The request could not be built.
        """
        return self._send("search", app_name, self.build_search_request(app_name, query))

    def update(self, app_name: str, records: Sequence[Record]) -> Result[Any, KintoneError]:
        """Update records in an app.

        Returns:
            Success(response): Raw transport response, whatever its status.
            Failure(KintoneError): The request could not be built.
        """
        return self._send("update", app_name, self.build_update_request(app_name, records))

    def destroy(
        self, app_name: str, record_ids: Sequence[RecordId]
    ) -> Result[Any, KintoneError]:
        """Delete records in an app by record id.

        Returns:
            Success(response): Raw transport response, whatever its status.
            Failure(KintoneError): The request could not be built.
        """
        return self._send("destroy", app_name, self.build_destroy_request(app_name, record_ids))

    def _send(
        self,
        operation: str,
        app_name: str,
        descriptor_result: Result[RequestDescriptor, KintoneError],
    ) -> Result[Any, KintoneError]:
        if isinstance(descriptor_result, Failure):
            self._logger.warning(
                "kintone_request_rejected",
                operation=operation,
                app_name=app_name,
                error_code=descriptor_result.error.code.value,
            )
            return descriptor_result

        descriptor = descriptor_result.value
        self._logger.debug(
            "kintone_request_started",
            operation=operation,
            app_name=app_name,
            method=descriptor.method.value,
        )

        response = self._transport.fetch(descriptor.url, descriptor.options)

        self._logger.info(
            "kintone_request_completed",
            operation=operation,
            app_name=app_name,
            method=descriptor.method.value,
            status_code=getattr(response, "status_code", None),
        )
        return Success(value=response)

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        mode = self._credentials.source.value if self._credentials else "api_token"
        return f"ApiClient(subdomain={self._subdomain!r}, apps={len(self._apps)}, auth={mode})"


def _with_app_name(error: KintoneError, app_name: str) -> KintoneError:
    """Copy an error with the app name filled in."""
    return type(error)(
        code=error.code,
        message=error.message,
        details=error.details,
        app_name=app_name,
    )
