"""Wrappers that turn raised exceptions into Failure results.

Usage:
    from wellcrafted.core.try_wrap import try_sync
    from wellcrafted.error.messages import summarize_exception

    result = try_sync(
        lambda: json.loads(raw),
        map_error=lambda exc: ParseError(context=summarize_exception(exc)),
    )

``map_error`` may return either the error itself or an already wrapped
Failure (for example from an Err-form constructor such as ``ParseErr``).
Only ``Exception`` subclasses are caught; exceptions raised by ``map_error``
propagate.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from wellcrafted.core.container import get_logger
from wellcrafted.core.errors import AsyncOperationError
from wellcrafted.core.result import Failure, Result, Success

T = TypeVar("T")


def _operation_name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def _to_failure(mapped: Any) -> Failure[Any]:
    if isinstance(mapped, Failure):
        return mapped
    return Failure(error=mapped)


def try_sync(
    operation: Callable[[], T],
    *,
    map_error: Callable[[Exception], Any],
) -> Result[T, Any]:
    """Run a synchronous operation, capturing exceptions as a Failure.

    Args:
        operation: Zero-argument callable to run.
        map_error: Converts the caught exception into an error value
            (or a Failure).

    Returns:
        Success with the operation's return value, or the mapped Failure.

    Raises:
        AsyncOperationError: If the operation returned an awaitable; use
            try_async instead.
    """
    try:
        value = operation()
    except Exception as exc:
        get_logger().debug(
            "Operation raised, mapping to failure",
            operation=_operation_name(operation),
            exception_type=type(exc).__name__,
        )
        return _to_failure(map_error(exc))

    if inspect.isawaitable(value):
        close = getattr(value, "close", None)
        if callable(close):
            close()
        raise AsyncOperationError(
            f"{_operation_name(operation)} returned an awaitable; use try_async"
        )
    return Success(value=value)


async def try_async(
    operation: Callable[[], Awaitable[T]],
    *,
    map_error: Callable[[Exception], Any],
) -> Result[T, Any]:
    """Await an asynchronous operation, capturing exceptions as a Failure.

    Args:
        operation: Zero-argument callable returning an awaitable.
        map_error: Converts the caught exception into an error value
            (or a Failure).

    Returns:
        Success with the awaited value, or the mapped Failure.
    """
    try:
        value = await operation()
    except Exception as exc:
        get_logger().debug(
            "Async operation raised, mapping to failure",
            operation=_operation_name(operation),
            exception_type=type(exc).__name__,
        )
        return _to_failure(map_error(exc))
    return Success(value=value)
