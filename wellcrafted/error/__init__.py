"""Tagged-error construction system.

Usage:
    from wellcrafted.error import TaggedError, create_error

    NetworkError, NetworkErr = create_error("NetworkError").with_message(
        lambda e: "network request failed"
    )
"""

from wellcrafted.error.builder import (
    ErrConstructor,
    ErrorBuilder,
    ErrorConstructor,
    ErrorFactories,
    MessageInput,
    MessageRule,
    create_error,
)
from wellcrafted.error.json_safety import ensure_json_safe, is_json_safe
from wellcrafted.error.messages import extract_error_message, summarize_exception
from wellcrafted.error.naming import ERR_SUFFIX, ERROR_SUFFIX, to_err_name, validate_error_name
from wellcrafted.error.tagged_error import AnyTaggedError, TaggedError

__all__ = [
    "AnyTaggedError",
    "ERR_SUFFIX",
    "ERROR_SUFFIX",
    "ErrConstructor",
    "ErrorBuilder",
    "ErrorConstructor",
    "ErrorFactories",
    "MessageInput",
    "MessageRule",
    "TaggedError",
    "create_error",
    "ensure_json_safe",
    "extract_error_message",
    "is_json_safe",
    "summarize_exception",
    "to_err_name",
    "validate_error_name",
]
