"""kintone client error types.

These errors describe why a request could not be built. They never cover
transport failures (those propagate from the transport) and never cover
error responses from the remote API (those are returned to the caller as
ordinary responses).

Architecture:
- Domain layer errors
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    from src.domain.errors import ConfigurationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(
        error=ConfigurationError(
            code=ErrorCode.APP_NOT_FOUND,
            message="Unknown app: customers",
            app_name="customers",
        )
    )
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class KintoneError(DomainError):
    """Base kintone client error.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        app_name: Registry name of the targeted app, when known.
        details: Additional context.
    """

    app_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(KintoneError):
    """Caller configuration defect.

    Returned when:
    - The app name is not in the registry (APP_NOT_FOUND)
    - The registry entry has no numeric app id (APP_ID_MISSING)
    - The subdomain cannot form a host (INVALID_SUBDOMAIN)

    Recovery: Fix the registry or settings. Never retried.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(KintoneError):
    """No credential could be resolved for a call.

    Returned when the client holds no username/password credential and the
    targeted app carries no API token (CREDENTIALS_MISSING). The request is
    never handed to the transport.
    """

    pass
