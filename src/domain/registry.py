"""App Registry - caller-defined catalog of kintone apps.

Maps an app name chosen by the caller (e.g. "customers") to the AppConfig
the client needs to reach that app. The registry is built once, is
immutable, and answers lookups with Result types so unknown names and
misconfigured entries surface as ConfigurationError values.

Registry Structure:
    - AppRegistry: Immutable name -> AppConfig mapping
    - from_mapping(): Builds a registry from plain dicts (settings, JSON)

Usage:
    from src.domain.registry import AppRegistry

    registry = AppRegistry.from_mapping(
        {
            "customers": {"appId": 12, "apiToken": "..."},
            "partner_orders": {"appId": 3, "guestId": 7},
        }
    )

    match registry.get("customers"):
        case Success(value=app):
            print(app.app_id)
        case Failure(error=error):
            print(error.message)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ConfigurationError
from src.domain.value_objects import AppConfig

# Accepted keys per AppConfig field, camelCase first.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "app_id": ("appId", "app_id"),
    "guest_id": ("guestId", "guest_id"),
    "display_name": ("name", "display_name", "displayName"),
    "api_token": ("apiToken", "api_token", "token"),
}


def _pick(raw: Mapping[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES[field_name]:
        if key in raw:
            return raw[key]
    return None


def _coerce_id(value: Any, field_name: str, app_name: str) -> int | None:
    """Normalize an id read from configuration.

    Raises:
        ValueError: If the value cannot be read as an integer id.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"App '{app_name}': {field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(
        f"App '{app_name}': {field_name} must be an integer, got {value!r}"
    )


def app_config_from_mapping(app_name: str, raw: Mapping[str, Any]) -> AppConfig:
    """Build an AppConfig from a plain dict.

    A missing app id is kept as None; it is reported when the app is used.

    Args:
        app_name: Registry name (used in error messages only).
        raw: Dict with camelCase or snake_case keys.

    Returns:
        AppConfig: Parsed configuration.

    Raises:
        ValueError: If an id is present but not an integer.
    """
    display_name = _pick(raw, "display_name")
    api_token = _pick(raw, "api_token")
    return AppConfig(
        app_id=_coerce_id(_pick(raw, "app_id"), "app_id", app_name),
        guest_id=_coerce_id(_pick(raw, "guest_id"), "guest_id", app_name),
        display_name=str(display_name) if display_name is not None else None,
        api_token=str(api_token) if api_token else None,
    )


class AppRegistry:
    """Immutable mapping from app name to AppConfig.

    Attributes:
        _apps: Read-only view over the name -> AppConfig dict.

    Example:
        >>> registry = AppRegistry({"customers": AppConfig(app_id=12)})
        >>> "customers" in registry
        True
    """

    __slots__ = ("_apps",)

    def __init__(self, apps: Mapping[str, AppConfig] | None = None) -> None:
        """Initialize the registry.

        Args:
            apps: Mapping of app name to AppConfig. Copied on construction.

        Raises:
            TypeError: If a value is not an AppConfig.
        """
        copied = dict(apps or {})
        for name, app in copied.items():
            if not isinstance(app, AppConfig):
                raise TypeError(
                    f"App '{name}' must be an AppConfig, got {type(app).__name__}"
                )
        self._apps: Mapping[str, AppConfig] = MappingProxyType(copied)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "AppRegistry":
        """Build a registry from plain dicts (or AppConfig values).

        Args:
            raw: Mapping of app name to dict or AppConfig.

        Returns:
            AppRegistry: New registry.

        Raises:
            ValueError: If an entry has a non-integer id.
            TypeError: If an entry is neither a mapping nor an AppConfig.
        """
        apps: dict[str, AppConfig] = {}
        for name, entry in raw.items():
            if isinstance(entry, AppConfig):
                apps[name] = entry
            elif isinstance(entry, Mapping):
                apps[name] = app_config_from_mapping(name, entry)
            else:
                raise TypeError(
                    f"App '{name}' must be a mapping, got {type(entry).__name__}"
                )
        return cls(apps)

    def get(self, app_name: str) -> Result[AppConfig, ConfigurationError]:
        """Resolve an app by name.

        Args:
            app_name: Registry name of the app.

        Returns:
            Success(AppConfig): The app, with a numeric app id.
            Failure(ConfigurationError): APP_NOT_FOUND if the name is unknown,
                APP_ID_MISSING if the entry has no app id.
        """
        app = self._apps.get(app_name)
        if app is None:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.APP_NOT_FOUND,
                    message=f"App '{app_name}' is not registered",
                    app_name=app_name,
                    details={"registered_apps": ", ".join(sorted(self._apps))},
                )
            )
        if app.app_id is None:
            return Failure(
                error=ConfigurationError(
                    code=ErrorCode.APP_ID_MISSING,
                    message=f"App '{app_name}' has no app id configured",
                    app_name=app_name,
                )
            )
        return Success(value=app)

    def names(self) -> list[str]:
        """Registered app names, in registration order."""
        return list(self._apps)

    def __contains__(self, app_name: object) -> bool:
        return app_name in self._apps

    def __iter__(self) -> Iterator[str]:
        return iter(self._apps)

    def __len__(self) -> int:
        return len(self._apps)

    def __repr__(self) -> str:
        return f"AppRegistry({', '.join(self._apps)})"
