"""Pydantic schemas for decoding wire payloads."""

from wellcrafted.schemas.wire_schemas import (
    ResultPayload,
    TaggedErrorPayload,
    parse_result,
    parse_tagged_error,
)

__all__ = [
    "ResultPayload",
    "TaggedErrorPayload",
    "parse_result",
    "parse_tagged_error",
]
