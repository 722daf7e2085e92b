"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level configuration

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture
def mock_structlog():
    with patch("src.infrastructure.logging.console_adapter.structlog") as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, mock_structlog, level):
        """Test level methods forward message and structured context."""
        adapter = ConsoleAdapter()

        getattr(adapter, level)("kintone_request_started", app_name="customers")

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "kintone_request_started",
            app_name="customers",
        )

    def test_error_includes_exception_details(self, mock_structlog):
        """Test error() adds error_type and error_message."""
        adapter = ConsoleAdapter()

        adapter.error("transport_failed", error=ConnectionError("refused"), attempt=1)

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "transport_failed",
            attempt=1,
            error_type="ConnectionError",
            error_message="refused",
        )

    def test_critical_without_exception(self, mock_structlog):
        """Test critical() without an exception logs context only."""
        adapter = ConsoleAdapter()

        adapter.critical("registry_unreadable", source="env")

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "registry_unreadable",
            source="env",
        )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test ConsoleAdapter context binding methods."""

    def test_bind_returns_new_adapter_with_bound_context(self, mock_structlog):
        """Test bind() returns new adapter wrapping the bound logger."""
        mock_logger = mock_structlog.get_logger.return_value
        adapter = ConsoleAdapter()

        bound_adapter = adapter.bind(component="kintone_api")

        mock_logger.bind.assert_called_once_with(component="kintone_api")
        assert bound_adapter is not adapter
        assert bound_adapter._logger == mock_logger.bind.return_value

    def test_with_context_is_alias_for_bind(self, mock_structlog):
        """Test with_context() binds the same way."""
        mock_logger = mock_structlog.get_logger.return_value
        adapter = ConsoleAdapter()

        adapter.with_context(app_name="customers")

        mock_logger.bind.assert_called_once_with(app_name="customers")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self, mock_structlog):
        """Test use_json selects the JSON renderer."""
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert mock_structlog.processors.JSONRenderer.return_value in processors

    def test_console_renderer_by_default(self, mock_structlog):
        """Test human-readable renderer is the default."""
        ConsoleAdapter()

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert mock_structlog.dev.ConsoleRenderer.return_value in processors

    def test_level_filters_bound_logger(self, mock_structlog):
        """Test level name maps to the filtering bound logger."""
        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.WARNING)
