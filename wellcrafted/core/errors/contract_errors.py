"""Contract violation exceptions.

These are programmer errors raised while defining or calling a tagged-error
kind. They are NOT domain errors: domain failures flow as TaggedError values
inside Failure results and are never raised.

Hierarchy:
    ContractViolationError (base)
    ├── InvalidErrorNameError (name does not end in "Error")
    ├── DuplicateStepError (builder step applied twice)
    ├── InvalidShapeError (unusable context/cause declaration)
    ├── MissingFieldError (required context/cause not supplied)
    ├── UnexpectedFieldError (undeclared context/cause supplied)
    ├── ContextShapeError (context does not match declared shape)
    ├── CauseShapeError (cause is not an allowed tagged error)
    ├── MessageRuleError (message rule unusable or returned a non-string)
    ├── NonSerializableValueError (value cannot round-trip through JSON)
    └── AsyncOperationError (awaitable handed to a sync wrapper)
"""

from wellcrafted.core.enums import ViolationCode


class ContractViolationError(Exception):
    """Base exception for misuse of the tagged-error system.

    Attributes:
        code: Machine-readable violation code.
        error_name: Name of the error kind involved, when known.
    """

    code: ViolationCode = ViolationCode.INVALID_SHAPE

    def __init__(self, message: str, *, error_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_name = error_name


class InvalidErrorNameError(ContractViolationError):
    """Error kind name does not end with the "Error" suffix."""

    code = ViolationCode.INVALID_ERROR_NAME


class DuplicateStepError(ContractViolationError):
    """A builder step (with_context / with_cause) was applied twice."""

    code = ViolationCode.DUPLICATE_STEP


class InvalidShapeError(ContractViolationError):
    """A context or cause declaration cannot be used."""

    code = ViolationCode.INVALID_SHAPE


class MissingFieldError(ContractViolationError):
    """A required context or cause was not supplied.

    Attributes:
        field: "context" or "cause".
    """

    code = ViolationCode.MISSING_FIELD

    def __init__(self, message: str, *, field: str, error_name: str | None = None) -> None:
        super().__init__(message, error_name=error_name)
        self.field = field


class UnexpectedFieldError(ContractViolationError):
    """A context or cause was supplied to a kind that does not declare one.

    Attributes:
        field: "context" or "cause".
    """

    code = ViolationCode.UNEXPECTED_FIELD

    def __init__(self, message: str, *, field: str, error_name: str | None = None) -> None:
        super().__init__(message, error_name=error_name)
        self.field = field


class ContextShapeError(ContractViolationError):
    """Context value does not match the declared shape."""

    code = ViolationCode.CONTEXT_SHAPE


class CauseShapeError(ContractViolationError):
    """Cause value is not a tagged error of an allowed kind."""

    code = ViolationCode.CAUSE_SHAPE


class MessageRuleError(ContractViolationError):
    """Message rule is not callable, or produced something other than a str."""

    code = ViolationCode.MESSAGE_RULE


class NonSerializableValueError(ContractViolationError):
    """Value cannot survive a lossless JSON round-trip.

    Attributes:
        path: JSON path of the offending value (e.g. "context.items[2]").
    """

    code = ViolationCode.NON_SERIALIZABLE

    def __init__(self, message: str, *, path: str, error_name: str | None = None) -> None:
        super().__init__(message, error_name=error_name)
        self.path = path


class AsyncOperationError(ContractViolationError):
    """try_sync was handed an operation that returned an awaitable."""

    code = ViolationCode.ASYNC_OPERATION
