"""Protocols the library depends on (structural subtyping)."""

from wellcrafted.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
