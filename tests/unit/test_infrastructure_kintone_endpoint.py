"""Unit tests for endpoint derivation.

Tests cover:
- Cloud subdomains get the cybozu.com suffix
- Custom domains ending in .com are used verbatim
- Guest space path segment
- Malformed subdomains
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import ConfigurationError
from src.infrastructure.kintone.endpoint import (
    api_base_path,
    derive_endpoint,
    derive_host,
    records_url,
)


@pytest.mark.unit
class TestDeriveHost:
    """Test host derivation."""

    @pytest.mark.parametrize("subdomain", ["example", "my-team", "example.cybozu"])
    def test_appends_cloud_suffix(self, subdomain):
        """Subdomains not ending in .com get .cybozu.com appended."""
        assert derive_host(subdomain) == Success(value=f"{subdomain}.cybozu.com")

    @pytest.mark.parametrize(
        "subdomain", ["example.cybozu.com", "records.example.com", "a.com"]
    )
    def test_custom_domain_used_verbatim(self, subdomain):
        """Subdomains ending in .com are used as the host unchanged."""
        assert derive_host(subdomain) == Success(value=subdomain)

    def test_suffix_match_is_literal(self):
        """'.co.jp' is not '.com'; the cloud suffix is appended."""
        assert derive_host("example.co.jp") == Success(value="example.co.jp.cybozu.com")

    @pytest.mark.parametrize("subdomain", ["", "   "])
    def test_empty_subdomain_fails(self, subdomain):
        """Empty subdomain cannot form a host."""
        result = derive_host(subdomain)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConfigurationError)
        assert result.error.code == ErrorCode.INVALID_SUBDOMAIN

    @pytest.mark.parametrize("subdomain", ["exa mple", "example/evil", "https://x.com/"])
    def test_subdomain_with_path_or_space_fails(self, subdomain):
        """Slashes and whitespace are rejected."""
        result = derive_host(subdomain)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_SUBDOMAIN


@pytest.mark.unit
class TestDeriveEndpoint:
    """Test full endpoint derivation."""

    def test_without_guest_space(self):
        """Regular apps use /k/v1 over https."""
        assert derive_endpoint("example") == Success(
            value="https://example.cybozu.com/k/v1"
        )

    def test_with_guest_space(self):
        """Guest space apps use /k/guest/{id}/v1."""
        assert derive_endpoint("example", guest_id=7) == Success(
            value="https://example.cybozu.com/k/guest/7/v1"
        )

    def test_custom_domain_with_guest_space(self):
        """Custom domain and guest path combine."""
        assert derive_endpoint("records.example.com", 12) == Success(
            value="https://records.example.com/k/guest/12/v1"
        )

    def test_guest_id_zero_is_present(self):
        """Zero is a value, not absence."""
        assert api_base_path(0) == "/k/guest/0/v1"

    def test_is_deterministic(self):
        """Same input, same output."""
        assert derive_endpoint("example", 7) == derive_endpoint("example", 7)

    def test_propagates_invalid_subdomain(self):
        """Host failures come back unchanged."""
        result = derive_endpoint("", guest_id=7)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_SUBDOMAIN

    def test_records_url(self):
        """records.json hangs off the endpoint."""
        assert (
            records_url("https://example.cybozu.com/k/v1")
            == "https://example.cybozu.com/k/v1/records.json"
        )
