"""kintone REST API integration.

Usage:
    from src.infrastructure.kintone import ApiClient

    client = ApiClient.with_api_tokens("example", {"customers": {"appId": 12, "apiToken": "..."}})
"""

from src.infrastructure.kintone.api_client import ApiClient
from src.infrastructure.kintone.auth import select_auth_header
from src.infrastructure.kintone.endpoint import derive_endpoint, derive_host, records_url

__all__ = [
    "ApiClient",
    "derive_endpoint",
    "derive_host",
    "records_url",
    "select_auth_header",
]
