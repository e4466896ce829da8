"""Fluent builder for tagged-error kinds.

Declare an error kind once, at module level, then construct values of it
wherever the failure happens:

    class FileContext(TypedDict):
        path: str

    FileError, FileErr = (
        create_error("FileError")
        .with_context(FileContext)
        .with_message(lambda e: f"not found: {e['context']['path']}")
    )

    FileError(context={"path": "/tmp/x"})
    # TaggedError(name="FileError", message="not found: /tmp/x",
    #             context={"path": "/tmp/x"})
    FileErr(context={"path": "/tmp/x"})
    # Failure(error=TaggedError(...))

Stages:
    create_error(name)         name fixed, must end in "Error"
    .with_context(shape)       optional, at most once
    .with_cause(*kinds)        optional, at most once, any order
    .with_message(rule)        required, terminal; returns ErrorFactories

Only ErrorFactories carries constructors, and it has no configuration
methods. Every rule the builder declares is enforced at call time by raising
a ContractViolationError subclass.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import Any, NotRequired, Required, TypedDict

from wellcrafted.core.container import get_logger
from wellcrafted.core.errors import (
    CauseShapeError,
    ContractViolationError,
    DuplicateStepError,
    MessageRuleError,
    MissingFieldError,
    UnexpectedFieldError,
)
from wellcrafted.core.result import Failure
from wellcrafted.error.naming import to_err_name, validate_error_name
from wellcrafted.error.shapes import CauseShape, ContextShape
from wellcrafted.error.tagged_error import TaggedError


class MessageInput(TypedDict):
    """Bundle handed to a message rule.

    ``context`` and ``cause`` keys are present only when the kind declares
    them; their value is None when absent at the call site.
    """

    name: Required[str]
    context: NotRequired[Any]
    cause: NotRequired[TaggedError | None]


MessageRule = Callable[[MessageInput], str]


def _report(violation: ContractViolationError) -> ContractViolationError:
    get_logger().warning(
        "Tagged error contract violation",
        error_name=violation.error_name,
        code=violation.code.value,
        detail=violation.message,
    )
    return violation


def _presence(shape: ContextShape | CauseShape | None) -> str:
    if shape is None:
        return "absent"
    return "optional" if shape.optional else "required"


@dataclass(frozen=True, slots=True)
class _ErrorKind:
    """Finalized declaration shared by both constructors of one kind."""

    name: str
    err_name: str
    context_shape: ContextShape | None
    cause_shape: CauseShape | None
    message_rule: MessageRule

    def resolve_context(self, value: Any) -> Any:
        shape = self.context_shape
        if shape is None:
            if value is not None:
                raise _report(
                    UnexpectedFieldError(
                        f"{self.name} does not declare a context",
                        field="context",
                        error_name=self.name,
                    )
                )
            return None
        if value is None:
            if not shape.optional:
                raise _report(
                    MissingFieldError(
                        f"{self.name} requires a context",
                        field="context",
                        error_name=self.name,
                    )
                )
            return None
        try:
            return shape.validate(value, error_name=self.name)
        except ContractViolationError as exc:
            _report(exc)
            raise

    def resolve_cause(self, value: Any) -> TaggedError | None:
        shape = self.cause_shape
        if shape is None:
            if value is not None:
                raise _report(
                    UnexpectedFieldError(
                        f"{self.name} does not declare a cause",
                        field="cause",
                        error_name=self.name,
                    )
                )
            return None
        if value is None:
            if not shape.optional:
                raise _report(
                    MissingFieldError(
                        f"{self.name} requires a cause",
                        field="cause",
                        error_name=self.name,
                    )
                )
            return None
        try:
            return shape.validate(value, error_name=self.name)
        except ContractViolationError as exc:
            _report(exc)
            raise

    def mismatch(self, value: TaggedError) -> str | None:
        """Describe how an existing value departs from this kind, or None.

        Messages are not checked; an explicit message is always allowed.
        """
        if value.name != self.name:
            return f"is named {value.name}, expected {self.name}"

        context_shape = self.context_shape
        if context_shape is None:
            if value.context is not None:
                return "carries a context its kind does not declare"
        elif value.context is None:
            if not context_shape.optional:
                return "is missing its required context"
        elif not context_shape.conforms(value.context):
            return "has a context that does not match its declared shape"

        cause_shape = self.cause_shape
        if cause_shape is None:
            if value.cause is not None:
                return "carries a cause its kind does not declare"
        elif value.cause is None:
            if not cause_shape.optional:
                return "is missing its required cause"
        else:
            try:
                cause_shape.validate(value.cause, error_name=self.name)
            except CauseShapeError as exc:
                return f"has an invalid cause ({exc.message})"
        return None

    def compute_message(self, context: Any, cause: TaggedError | None) -> str:
        bundle: MessageInput = {"name": self.name}
        if self.context_shape is not None:
            bundle["context"] = context
        if self.cause_shape is not None:
            bundle["cause"] = cause
        message = self.message_rule(bundle)
        if not isinstance(message, str):
            raise _report(
                MessageRuleError(
                    f"{self.name} message rule returned {type(message).__name__}, expected str",
                    error_name=self.name,
                )
            )
        return message

    def build(self, *, message: str | None, context: Any, cause: Any) -> TaggedError:
        context_value = self.resolve_context(context)
        cause_value = self.resolve_cause(cause)
        if message is None:
            message = self.compute_message(context_value, cause_value)
        elif not isinstance(message, str):
            raise _report(
                MessageRuleError(
                    f"{self.name} message override must be a str, got {type(message).__name__}",
                    error_name=self.name,
                )
            )
        return TaggedError(
            name=self.name,
            message=message,
            context=context_value,
            cause=cause_value,
        )


class _KindConstructor:
    """Shared surface of the two constructors of one kind."""

    def __init__(self, kind: _ErrorKind, name: str) -> None:
        self._kind = kind
        self.__name__ = name
        self.__qualname__ = name

    @property
    def error_name(self) -> str:
        """Discriminant of the values this constructor produces."""
        return self._kind.name

    @property
    def err_name(self) -> str:
        """Name of the Result-wrapped constructor of this kind."""
        return self._kind.err_name

    def matches(self, value: object) -> bool:
        """Check whether value is a tagged error of this kind."""
        return isinstance(value, TaggedError) and value.name == self._kind.name

    def mismatch(self, value: TaggedError) -> str | None:
        """Describe how value departs from this kind's declaration, or None."""
        return self._kind.mismatch(value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.__name__}>"


class ErrorConstructor(_KindConstructor):
    """Builds bare TaggedError values of one kind."""

    def __call__(
        self,
        *,
        context: Any = None,
        cause: TaggedError | None = None,
        message: str | None = None,
    ) -> TaggedError:
        """Construct a tagged error.

        Args:
            context: Context value, validated against the declared shape.
            cause: Tagged error that led to this one.
            message: Explicit message; when omitted the kind's message rule
                computes it.

        Returns:
            TaggedError: A fresh, immutable error value.

        Raises:
            MissingFieldError: Required context/cause not supplied.
            UnexpectedFieldError: Context/cause supplied but not declared.
            ContextShapeError: Context does not match the declared shape.
            CauseShapeError: Cause is not an allowed tagged error.
            MessageRuleError: Message rule returned a non-string.
        """
        return self._kind.build(message=message, context=context, cause=cause)


class ErrConstructor(_KindConstructor):
    """Builds TaggedError values of one kind wrapped in Failure."""

    def __call__(
        self,
        *,
        context: Any = None,
        cause: TaggedError | None = None,
        message: str | None = None,
    ) -> Failure[TaggedError]:
        """Construct a tagged error and wrap it in Failure.

        Same inputs and contract violations as ErrorConstructor.
        """
        return Failure(
            error=self._kind.build(message=message, context=context, cause=cause)
        )


@dataclass(frozen=True, slots=True)
class ErrorFactories:
    """The two constructors of a finalized error kind.

    Unpacks as ``(error, err)`` and also resolves each constructor by its
    own name:

        FileError, FileErr = factories
        factories.FileError is factories.error
        factories.FileErr is factories.err
    """

    error: ErrorConstructor
    err: ErrConstructor

    @property
    def error_name(self) -> str:
        """Discriminant of the values this kind produces."""
        return self.error.error_name

    def mismatch(self, value: TaggedError) -> str | None:
        """Describe how value departs from this kind's declaration, or None."""
        return self.error.mismatch(value)

    def __iter__(self) -> Iterator[Any]:
        yield self.error
        yield self.err

    def __getattr__(self, attr: str) -> Any:
        # Only reached for names the dataclass does not define.
        if attr.startswith("_") or attr in ("error", "err"):
            raise AttributeError(attr)
        if attr == self.error.__name__:
            return self.error
        if attr == self.err.__name__:
            return self.err
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {attr!r}")


@dataclass(frozen=True, slots=True)
class ErrorBuilder:
    """Unfinalized declaration of one error kind.

    Holds no constructors; call with_message to obtain them.

    Attributes:
        name: Discriminant of the kind.
        context_shape: Declared context, or None if not declared.
        cause_shape: Declared cause kinds, or None if not declared.
    """

    name: str
    context_shape: ContextShape | None = None
    cause_shape: CauseShape | None = None

    def with_context(self, shape: Any) -> "ErrorBuilder":
        """Declare the context type of this kind.

        Args:
            shape: Type annotation pydantic can validate (TypedDict,
                BaseModel, dataclass, ``dict[str, int]``...). Include None
                (``Shape | None``) to make context optional. Under strict
                validation (the default) a dataclass shape only accepts
                instances of that dataclass, while TypedDict and BaseModel
                shapes also accept plain dicts; set
                ``WELLCRAFTED_STRICT_VALIDATION=false`` to pass dicts for
                dataclass shapes.

        Returns:
            ErrorBuilder: A new builder with the context declared.

        Raises:
            DuplicateStepError: If context was already declared.
            InvalidShapeError: If the shape cannot be validated.
        """
        if self.context_shape is not None:
            raise _report(
                DuplicateStepError(
                    f"{self.name}: with_context may only be applied once",
                    error_name=self.name,
                )
            )
        try:
            context_shape = ContextShape.declare(shape, error_name=self.name)
        except ContractViolationError as exc:
            _report(exc)
            raise
        return replace(self, context_shape=context_shape)

    def with_cause(self, *kinds: Any) -> "ErrorBuilder":
        """Declare which tagged-error kinds may cause this one.

        Args:
            *kinds: TaggedError (any kind), constructors or factories of
                specific kinds, kind-name strings, and None to make the
                cause optional. Causes of kinds given by constructor or
                factories must also match that kind's context and cause
                declarations; kinds given by name are matched on name only.

        Returns:
            ErrorBuilder: A new builder with the cause declared.

        Raises:
            DuplicateStepError: If cause was already declared.
            InvalidShapeError: If no usable kind is given.
        """
        if self.cause_shape is not None:
            raise _report(
                DuplicateStepError(
                    f"{self.name}: with_cause may only be applied once",
                    error_name=self.name,
                )
            )
        try:
            cause_shape = CauseShape.declare(kinds, error_name=self.name)
        except ContractViolationError as exc:
            _report(exc)
            raise
        return replace(self, cause_shape=cause_shape)

    def with_message(self, rule: MessageRule) -> ErrorFactories:
        """Finalize the kind with its message rule.

        Args:
            rule: Called with a MessageInput for every construction that does
                not pass an explicit message; must return a str.

        Returns:
            ErrorFactories: The bare and Result-wrapped constructors.

        Raises:
            MessageRuleError: If rule is not callable.
        """
        if not callable(rule):
            raise _report(
                MessageRuleError(
                    f"{self.name}: message rule must be callable, got {type(rule).__name__}",
                    error_name=self.name,
                )
            )
        kind = _ErrorKind(
            name=self.name,
            err_name=to_err_name(self.name),
            context_shape=self.context_shape,
            cause_shape=self.cause_shape,
            message_rule=rule,
        )
        get_logger().debug(
            "Tagged error kind defined",
            error_name=kind.name,
            err_name=kind.err_name,
            context=_presence(kind.context_shape),
            cause=_presence(kind.cause_shape),
        )
        return ErrorFactories(
            error=ErrorConstructor(kind, kind.name),
            err=ErrConstructor(kind, kind.err_name),
        )


def create_error(name: str) -> ErrorBuilder:
    """Start declaring a tagged-error kind.

    Args:
        name: Discriminant of the kind; must end in "Error".

    Returns:
        ErrorBuilder: Unconfigured builder.

    Raises:
        InvalidErrorNameError: If name does not end in "Error".
    """
    try:
        validate_error_name(name)
    except ContractViolationError as exc:
        _report(exc)
        raise
    return ErrorBuilder(name=name)
