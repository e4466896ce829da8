"""Contract violation codes (machine-readable).

A contract violation is a programmer mistake made while defining or calling
a tagged-error kind. These codes label them; they never appear on the
tagged-error values themselves.
"""

from enum import Enum


class ViolationCode(Enum):
    """Machine-readable codes for builder and constructor misuse."""

    # Definition-time violations
    INVALID_ERROR_NAME = "invalid_error_name"
    DUPLICATE_STEP = "duplicate_step"
    INVALID_SHAPE = "invalid_shape"

    # Call-time violations
    MISSING_FIELD = "missing_field"
    UNEXPECTED_FIELD = "unexpected_field"
    CONTEXT_SHAPE = "context_shape"
    CAUSE_SHAPE = "cause_shape"
    MESSAGE_RULE = "message_rule"

    # Payload violations
    NON_SERIALIZABLE = "non_serializable"

    # Try wrappers
    ASYNC_OPERATION = "async_operation"
