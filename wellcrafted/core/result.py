"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")

Wire form:
    Success -> {"data": value, "error": None}
    Failure -> {"data": None, "error": error}
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar

from wellcrafted.core.errors import UnwrapError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


def _to_wire(payload: Any, path: str) -> Any:
    # Local import: the error package depends on this module.
    from wellcrafted.error.json_safety import ensure_json_safe

    to_dict = getattr(payload, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return ensure_json_safe(payload, path=path)


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire form.

        Raises:
            NonSerializableValueError: If the value is not JSON-safe.
        """
        return {"data": _to_wire(self.value, "data"), "error": None}


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire form.

        Raises:
            NonSerializableValueError: If the error is not JSON-safe.
        """
        return {"data": None, "error": _to_wire(self.error, "error")}


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def is_success(result: "Result[T, E]") -> TypeGuard[Success[T]]:
    """Check whether a Result is a Success.

    Narrows the type for static type checkers, so ``result.value`` is known
    to be present afterwards.
    """
    return isinstance(result, Success)


def is_failure(result: "Result[T, E]") -> TypeGuard[Failure[E]]:
    """Check whether a Result is a Failure.

    Narrows the type for static type checkers, so ``result.error`` is known
    to be present afterwards.
    """
    return isinstance(result, Failure)


def is_result(value: object) -> bool:
    """Check whether a value is a Result, in object or wire form.

    A wire-form Result is a mapping with exactly the keys ``data`` and
    ``error`` where at least one of them is None.

    Args:
        value: Any value.

    Returns:
        True for Success/Failure instances and valid wire-form mappings.
    """
    if isinstance(value, (Success, Failure)):
        return True
    if not isinstance(value, Mapping) or set(value.keys()) != {"data", "error"}:
        return False
    return value["data"] is None or value["error"] is None


def unwrap(result: "Result[T, E]") -> T:
    """Return the value of a Success.

    Args:
        result: Result to unwrap.

    Returns:
        The success value.

    Raises:
        UnwrapError: If the result is a Failure; carries the error.
    """
    if isinstance(result, Success):
        return result.value
    raise UnwrapError(result.error)


def resolve(value: "T | Result[T, E]") -> T:
    """Return a plain value as-is, or unwrap a Result.

    Args:
        value: A plain value or a Success/Failure.

    Returns:
        The plain value or the success value.

    Raises:
        UnwrapError: If the value is a Failure.
    """
    if isinstance(value, (Success, Failure)):
        return unwrap(value)
    return value


def partition_results(
    results: Iterable["Result[T, E]"],
) -> tuple[list[Success[T]], list[Failure[E]]]:
    """Split results into successes and failures, preserving order.

    Args:
        results: Any iterable of Results.

    Returns:
        Tuple of (successes, failures).
    """
    successes: list[Success[T]] = []
    failures: list[Failure[E]] = []
    for result in results:
        if isinstance(result, Success):
            successes.append(result)
        else:
            failures.append(result)
    return successes, failures
