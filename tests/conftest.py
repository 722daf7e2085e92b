"""Pytest configuration and shared fixtures.

Provides:
1. A recording transport so client tests never touch the network
2. Registries covering token, guest space and misconfigured apps
3. Settings cache isolation between tests
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from src.core.config import get_settings
from src.domain.registry import AppRegistry
from src.domain.value_objects import AppConfig, RequestOptions


@dataclass
class FakeResponse:
    """Stand-in for a transport response (opaque to the client)."""

    status_code: int = 200
    text: str = "{}"


@dataclass
class RecordingTransport:
    """Transport that records every fetch() call.

    Attributes:
        response: Returned from every fetch().
        calls: (url, options) tuples in call order.
        closed: Set by close().
    """

    response: Any = field(default_factory=FakeResponse)
    calls: list[tuple[str, RequestOptions]] = field(default_factory=list)
    closed: bool = False

    def fetch(self, url: str, options: RequestOptions) -> Any:
        self.calls.append((url, options))
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> RecordingTransport:
    """Fresh recording transport for each test."""
    return RecordingTransport()


@pytest.fixture
def registry() -> AppRegistry:
    """Registry with one app of each shape.

    - customers: API token, no guest space
    - partner_orders: guest space 7, API token
    - internal: no token
    - broken: no app id
    """
    return AppRegistry(
        {
            "customers": AppConfig(
                app_id=12, display_name="Customers", api_token="customers-token"
            ),
            "partner_orders": AppConfig(
                app_id=3, guest_id=7, display_name="Orders", api_token="orders-token"
            ),
            "internal": AppConfig(app_id=40, display_name="Internal"),
            "broken": AppConfig(display_name="Broken"),
        }
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests that exercise real httpx plumbing"
    )
