"""Core shared kernel.

This module provides foundational utilities used by the error system:
- Result types for railway-oriented programming
- Try wrappers that turn exceptions into Failure results
- Contract violation exceptions for builder misuse
"""

from wellcrafted.core.errors import ContractViolationError, UnwrapError
from wellcrafted.core.result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_result,
    is_success,
    partition_results,
    resolve,
    unwrap,
)
from wellcrafted.core.try_wrap import try_async, try_sync

__all__ = [
    "ContractViolationError",
    "Failure",
    "Result",
    "Success",
    "UnwrapError",
    "is_failure",
    "is_result",
    "is_success",
    "partition_results",
    "resolve",
    "try_async",
    "try_sync",
    "unwrap",
]
