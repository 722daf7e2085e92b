"""Domain value objects.

Immutable value objects that enforce construction-time constraints.
"""

from src.domain.value_objects.app_config import AppConfig
from src.domain.value_objects.client_credentials import ClientCredentials
from src.domain.value_objects.request import RequestDescriptor, RequestOptions

__all__ = [
    "AppConfig",
    "ClientCredentials",
    "RequestDescriptor",
    "RequestOptions",
]
