"""Per-app connection parameters.

Immutable value object describing one kintone app as the caller knows it:
its numeric id, the guest space it lives in (if any), a display name and
an optional API token.

Usage:
    from src.domain.value_objects import AppConfig

    customers = AppConfig(app_id=12, api_token="token-for-app-12")
    partner_orders = AppConfig(app_id=3, guest_id=7, display_name="Orders")
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Connection parameters for a single app.

    Attributes:
        app_id: Numeric app identifier. None marks a misconfigured entry;
            the client reports it as a ConfigurationError when the app is
            used, not when the registry is built.
        guest_id: Guest space identifier, when the app lives in a guest space.
        display_name: Informational only; never used to build requests.
        api_token: Per-app API token, used when the client holds no
            username/password credential.

    Raises:
        ValueError: If an id is not an int (bool is rejected as well).
    """

    app_id: int | None = None
    guest_id: int | None = None
    display_name: str | None = None
    api_token: str | None = None

    def __post_init__(self) -> None:
        """Validate id types after initialization.

        Raises:
            ValueError: If app_id or guest_id is neither None nor an int.
        """
        for field_name in ("app_id", "guest_id"):
            value = getattr(self, field_name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                raise ValueError(f"{field_name} must be an int, got {value!r}")

    @property
    def has_api_token(self) -> bool:
        """Whether the app carries a usable API token."""
        return bool(self.api_token)

    def __repr__(self) -> str:
        """Return repr for debugging.

        Note: Does NOT include api_token for security.

        Returns:
            str: String representation without sensitive data.
        """
        return (
            f"AppConfig("
            f"app_id={self.app_id}, "
            f"guest_id={self.guest_id}, "
            f"display_name={self.display_name!r}, "
            f"api_token={'<set>' if self.has_api_token else None})"
        )
