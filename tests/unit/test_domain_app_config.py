"""Unit tests for AppConfig and AppRegistry.

Tests cover:
- AppConfig id validation and token redaction
- Registry lookups (found, unknown name, missing app id)
- Building registries from camelCase and snake_case dicts
- Immutability of the registry
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import ConfigurationError
from src.domain.registry import AppRegistry, app_config_from_mapping
from src.domain.value_objects import AppConfig


@pytest.mark.unit
class TestAppConfig:
    """Test AppConfig value object."""

    def test_defaults_to_no_guest_space_and_no_token(self):
        """App without guest id or token reports neither."""
        app = AppConfig(app_id=12)

        assert app.guest_id is None
        assert app.has_api_token is False

    def test_empty_token_is_not_usable(self):
        """An empty api_token does not count as a token."""
        assert AppConfig(app_id=12, api_token="").has_api_token is False

    def test_rejects_non_int_app_id(self):
        """String app ids must be coerced before construction."""
        with pytest.raises(ValueError, match="app_id must be an int"):
            AppConfig(app_id="12")  # type: ignore[arg-type]

    def test_rejects_bool_guest_id(self):
        """bool is not accepted as an id even though it subclasses int."""
        with pytest.raises(ValueError, match="guest_id must be an int"):
            AppConfig(app_id=1, guest_id=True)

    def test_repr_hides_api_token(self):
        """repr shows whether a token is set, never the token itself."""
        app = AppConfig(app_id=12, api_token="secret-token")

        assert "secret-token" not in repr(app)
        assert "<set>" in repr(app)

    def test_is_immutable(self):
        """Frozen dataclass rejects attribute assignment."""
        app = AppConfig(app_id=12)

        with pytest.raises(AttributeError):
            app.app_id = 13  # type: ignore[misc]


@pytest.mark.unit
class TestAppRegistryLookup:
    """Test AppRegistry.get()."""

    def test_returns_registered_app(self, registry):
        """Known name resolves to its AppConfig."""
        result = registry.get("customers")

        assert isinstance(result, Success)
        assert result.value.app_id == 12

    def test_unknown_name_is_configuration_error(self, registry):
        """Unknown name fails with APP_NOT_FOUND."""
        result = registry.get("nope")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConfigurationError)
        assert result.error.code == ErrorCode.APP_NOT_FOUND
        assert result.error.app_name == "nope"

    def test_missing_app_id_is_configuration_error(self, registry):
        """Entry without app id fails with APP_ID_MISSING at lookup time."""
        result = registry.get("broken")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_ID_MISSING
        assert result.error.app_name == "broken"

    def test_container_protocol(self, registry):
        """len, in and iteration reflect the registered names."""
        assert len(registry) == 4
        assert "customers" in registry
        assert "nope" not in registry
        assert list(registry) == registry.names()

    def test_registry_is_copied_on_construction(self):
        """Mutating the source dict does not change the registry."""
        source = {"customers": AppConfig(app_id=12)}
        registry = AppRegistry(source)

        source["other"] = AppConfig(app_id=99)

        assert "other" not in registry

    def test_rejects_non_app_config_values(self):
        """Plain dicts must go through from_mapping()."""
        with pytest.raises(TypeError):
            AppRegistry({"customers": {"appId": 12}})  # type: ignore[dict-item]


@pytest.mark.unit
class TestAppRegistryFromMapping:
    """Test building registries from plain dicts."""

    def test_reads_camel_case_keys(self):
        """camelCase keys map onto AppConfig fields."""
        registry = AppRegistry.from_mapping(
            {
                "orders": {
                    "appId": 3,
                    "guestId": 7,
                    "name": "Orders",
                    "apiToken": "orders-token",
                }
            }
        )

        app = registry.get("orders").value  # type: ignore[union-attr]
        assert app == AppConfig(
            app_id=3, guest_id=7, display_name="Orders", api_token="orders-token"
        )

    def test_reads_snake_case_keys(self):
        """snake_case keys are accepted too."""
        app = app_config_from_mapping(
            "orders", {"app_id": 3, "guest_id": 7, "api_token": "t"}
        )

        assert (app.app_id, app.guest_id, app.api_token) == (3, 7, "t")

    def test_coerces_numeric_strings(self):
        """Ids given as digit strings become ints."""
        app = app_config_from_mapping("orders", {"appId": "3", "guestId": " 7 "})

        assert app.app_id == 3
        assert app.guest_id == 7

    def test_empty_values_are_absent(self):
        """Empty strings for ids and tokens are treated as not set."""
        app = app_config_from_mapping("orders", {"appId": 3, "guestId": "", "apiToken": ""})

        assert app.guest_id is None
        assert app.api_token is None

    def test_missing_app_id_is_deferred(self):
        """Registry builds; the defect shows up on lookup."""
        registry = AppRegistry.from_mapping({"orders": {"name": "Orders"}})

        result = registry.get("orders")
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_ID_MISSING

    def test_non_numeric_id_raises(self):
        """A malformed id is a type error in the configuration itself."""
        with pytest.raises(ValueError, match="app_id must be an integer"):
            AppRegistry.from_mapping({"orders": {"appId": "three"}})

    def test_accepts_app_config_values(self):
        """AppConfig values pass through unchanged."""
        app = AppConfig(app_id=12)

        registry = AppRegistry.from_mapping({"customers": app})

        assert registry.get("customers").value is app  # type: ignore[union-attr]

    def test_rejects_other_entry_types(self):
        """Entries must be mappings or AppConfig instances."""
        with pytest.raises(TypeError):
            AppRegistry.from_mapping({"customers": 12})
