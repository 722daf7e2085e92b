"""Authentication header selection.

Exactly one header is emitted per request. Priority (first match wins):
    1. Client-level credentials -> X-Cybozu-Authorization
    2. The app's API token      -> X-Cybozu-API-Token
    3. Neither                  -> AuthenticationError

Selection happens per call because one registry may mix apps with and
without tokens.
"""

from src.core.constants import API_TOKEN_HEADER, PASSWORD_AUTH_HEADER
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.value_objects import AppConfig, ClientCredentials


def select_auth_header(
    app: AppConfig,
    credentials: ClientCredentials | None,
    *,
    app_name: str | None = None,
) -> Result[dict[str, str], AuthenticationError]:
    """Pick the authentication header for one request.

    Args:
        app: Targeted app.
        credentials: Client-level credentials, or None for token-only mode.
        app_name: Registry name, used in the error only.

    Returns:
        Success(dict): Single-entry header mapping.
        Failure(AuthenticationError): CREDENTIALS_MISSING when neither
            credentials nor an app token are available.
    """
    if credentials is not None:
        return Success(value={PASSWORD_AUTH_HEADER: credentials.encoded})

    if app.api_token:
        return Success(value={API_TOKEN_HEADER: app.api_token})

    return Failure(
        error=AuthenticationError(
            code=ErrorCode.CREDENTIALS_MISSING,
            message=(
                "No credentials available: the client has no username/password "
                "and the app has no API token"
            ),
            app_name=app_name,
        )
    )
