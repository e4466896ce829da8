"""Composition root for library-wide singletons.

Reference:
    Adapter selection lives here so that modules only ever see
    LoggerProtocol.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from wellcrafted.core.config import get_settings

if TYPE_CHECKING:
    from wellcrafted.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the library-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from wellcrafted.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
