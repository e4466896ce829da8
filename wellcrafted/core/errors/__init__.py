"""Core errors package.

Exports the exceptions raised for contract violations and explicit unwraps.

Usage:
    from wellcrafted.core.errors import ContractViolationError, MissingFieldError
"""

from wellcrafted.core.errors.contract_errors import (
    AsyncOperationError,
    CauseShapeError,
    ContextShapeError,
    ContractViolationError,
    DuplicateStepError,
    InvalidErrorNameError,
    InvalidShapeError,
    MessageRuleError,
    MissingFieldError,
    NonSerializableValueError,
    UnexpectedFieldError,
)
from wellcrafted.core.errors.unwrap_error import UnwrapError

__all__ = [
    "AsyncOperationError",
    "CauseShapeError",
    "ContextShapeError",
    "ContractViolationError",
    "DuplicateStepError",
    "InvalidErrorNameError",
    "InvalidShapeError",
    "MessageRuleError",
    "MissingFieldError",
    "NonSerializableValueError",
    "UnexpectedFieldError",
    "UnwrapError",
]
