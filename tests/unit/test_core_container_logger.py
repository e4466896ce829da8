"""Unit tests for get_logger() container function.

Tests cover:
- Adapter configuration derived from settings
- Singleton pattern (same instance returned)
- Environment-specific output format

Architecture:
- Unit tests with mocked settings and adapters
- Tests centralized dependency injection pattern
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from wellcrafted.core.config import Settings
from wellcrafted.core.container import get_logger
from wellcrafted.core.enums import Environment
from wellcrafted.infrastructure.logging import ConsoleAdapter

ADAPTER = "wellcrafted.infrastructure.logging.console_adapter.ConsoleAdapter"


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_adapter_format_follows_environment(self, environment, use_json):
        """Test JSON output everywhere except development."""
        settings = Settings(environment=environment, log_level="INFO")
        with patch("wellcrafted.core.container.get_settings", return_value=settings):
            with patch(ADAPTER) as mock_console:
                mock_adapter = MagicMock()
                mock_console.return_value = mock_adapter

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=use_json, level="INFO")
                assert logger is mock_adapter

    def test_level_read_from_environment(self):
        """Test WELLCRAFTED_LOG_LEVEL reaches the adapter."""
        with patch.dict(os.environ, {"WELLCRAFTED_LOG_LEVEL": "debug"}, clear=True):
            with patch(ADAPTER) as mock_console:
                get_logger()

                assert mock_console.call_args.kwargs["level"] == "DEBUG"

    def test_get_logger_returns_singleton(self):
        """Test get_logger() caches its adapter."""
        assert get_logger() is get_logger()

    def test_cache_clear_builds_new_adapter(self):
        """Test cache_clear() forces a new adapter."""
        first = get_logger()
        get_logger.cache_clear()

        assert get_logger() is not first

    def test_default_adapter_is_console(self):
        """Test the real adapter is a ConsoleAdapter."""
        assert isinstance(get_logger(), ConsoleAdapter)
