"""wellcrafted: operation outcomes as data.

Two cooperating halves:
- Result (Success / Failure) for returning failures instead of raising
- Tagged errors: JSON-serializable error values declared once per kind
  with create_error(...) and constructed on demand

Usage:
    from wellcrafted import Failure, Success, create_error, is_failure

    UserError, UserErr = (
        create_error("UserError")
        .with_context(dict[str, str])
        .with_message(lambda e: f"user {e['context']['id']} not found")
    )

    def find_user(user_id: str) -> Result[dict, TaggedError]:
        user = users.get(user_id)
        if user is None:
            return UserErr(context={"id": user_id})
        return Success(value=user)
"""

from wellcrafted.core import (
    ContractViolationError,
    Failure,
    Result,
    Success,
    UnwrapError,
    is_failure,
    is_result,
    is_success,
    partition_results,
    resolve,
    try_async,
    try_sync,
    unwrap,
)
from wellcrafted.error import (
    AnyTaggedError,
    ErrorFactories,
    TaggedError,
    create_error,
    extract_error_message,
    summarize_exception,
    to_err_name,
)
from wellcrafted.schemas import parse_result, parse_tagged_error

__version__ = "0.1.0"

__all__ = [
    "AnyTaggedError",
    "ContractViolationError",
    "ErrorFactories",
    "Failure",
    "Result",
    "Success",
    "TaggedError",
    "UnwrapError",
    "create_error",
    "extract_error_message",
    "is_failure",
    "is_result",
    "is_success",
    "parse_result",
    "parse_tagged_error",
    "partition_results",
    "resolve",
    "summarize_exception",
    "to_err_name",
    "try_async",
    "try_sync",
    "unwrap",
]
