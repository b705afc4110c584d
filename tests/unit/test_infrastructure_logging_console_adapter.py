"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward message and context
- error/critical add error_type and error_message
- bind returns a new adapter
- JSON output when use_json=True
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import structlog

from userwallet.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, level):
        with patch(
            "userwallet.infrastructure.logging.console_adapter.structlog"
        ) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("something_happened", request_id="abc")

            getattr(mock_logger, level).assert_called_once_with(
                "something_happened", request_id="abc"
            )

    def test_error_includes_exception_details(self):
        with patch(
            "userwallet.infrastructure.logging.console_adapter.structlog"
        ) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("find_failed", error=ValueError("bad row"), table="users")

            mock_logger.error.assert_called_once_with(
                "find_failed",
                table="users",
                error_type="ValueError",
                error_message="bad row",
            )

    def test_critical_without_error(self):
        with patch(
            "userwallet.infrastructure.logging.console_adapter.structlog"
        ) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("database_down")

            mock_logger.critical.assert_called_once_with("database_down")

    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(
            "userwallet.infrastructure.logging.console_adapter.structlog"
        ) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.with_context(request_id="abc")
            bound.info("hello")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(request_id="abc")
            bound_logger.info.assert_called_once_with("hello")


@pytest.fixture
def restore_structlog():
    """Undo the global structlog configuration made by a real adapter."""
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test rendered output."""

    def test_json_output_is_one_object_per_line(self, capsys, restore_structlog):
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.info("user_created", user_id="123")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "user_created"
        assert record["user_id"] == "123"
        assert record["level"] == "info"
