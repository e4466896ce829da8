"""Pytest configuration.

This configuration ensures:
1. Cached singletons (settings, logger) never leak between tests
2. Sample error kinds are available to every test module
"""

from typing import TypedDict

import pytest

from wellcrafted.core.config import get_settings
from wellcrafted.core.container import get_logger
from wellcrafted.error import ErrorFactories, create_error


@pytest.fixture(autouse=True)
def clear_singletons():
    """Clear lru_cache'd singletons before and after each test.

    Tests that patch environment variables get a fresh Settings, and tests
    that patch adapters get a fresh logger.
    """
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


class FileContext(TypedDict):
    """Context shape used by the sample FileError kind."""

    path: str


@pytest.fixture
def file_error() -> ErrorFactories:
    """FileError kind with required context and no cause."""
    return (
        create_error("FileError")
        .with_context(FileContext)
        .with_message(lambda e: "not found: " + e["context"]["path"])
    )


@pytest.fixture
def db_error() -> ErrorFactories:
    """DbError kind with neither context nor cause."""
    return create_error("DbError").with_message(lambda e: "database unavailable")


@pytest.fixture
def network_error() -> ErrorFactories:
    """NetworkError kind with neither context nor cause."""
    return create_error("NetworkError").with_message(lambda e: "network unreachable")
