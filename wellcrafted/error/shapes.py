"""Context and cause declarations for tagged-error kinds.

A kind may declare the shape of its context (any type pydantic can validate)
and which tagged-error kinds may appear as its cause. Each declaration is
either required or optional; optional means "may be absent", expressed by
including None in the declaration (``FileContext | None``,
``with_cause(DbError, None)``).
"""

import types
import typing
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from wellcrafted.core.config import get_settings
from wellcrafted.core.errors import CauseShapeError, ContextShapeError, InvalidShapeError
from wellcrafted.error.naming import validate_error_name
from wellcrafted.error.tagged_error import TaggedError

_NONE_TYPES = (None, type(None))


def _union_members(shape: Any) -> tuple[Any, ...]:
    if typing.get_origin(shape) in (typing.Union, types.UnionType):
        return typing.get_args(shape)
    return (shape,)


def admits_none(shape: Any) -> bool:
    """Check whether a type annotation accepts None."""
    return any(member in _NONE_TYPES for member in _union_members(shape))


@dataclass(frozen=True, slots=True)
class ContextShape:
    """Declared context type of one error kind.

    Attributes:
        shape: The declared type annotation.
        optional: True when the declaration admits None.
        adapter: pydantic TypeAdapter validating and serializing the shape.
    """

    shape: Any
    optional: bool
    adapter: TypeAdapter[Any]

    @classmethod
    def declare(cls, shape: Any, *, error_name: str) -> "ContextShape":
        """Build a context declaration.

        Raises:
            InvalidShapeError: If the shape is None alone, or pydantic cannot
                build a validator for it.
        """
        if shape in _NONE_TYPES:
            raise InvalidShapeError(
                f"{error_name}: context shape must not be None alone; "
                "skip with_context to declare no context",
                error_name=error_name,
            )
        try:
            adapter: TypeAdapter[Any] = TypeAdapter(shape)
        except (PydanticUserError, TypeError) as exc:
            raise InvalidShapeError(
                f"{error_name}: cannot validate context shape {shape!r}",
                error_name=error_name,
            ) from exc
        return cls(shape=shape, optional=admits_none(shape), adapter=adapter)

    def validate(self, value: Any, *, error_name: str) -> Any:
        """Validate a call-site context and return its JSON form.

        Args:
            value: Context supplied at the call site (not None).
            error_name: Kind being constructed.

        Returns:
            Plain JSON data (models become dicts, datetimes ISO strings).

        Raises:
            ContextShapeError: If the value does not match the shape.
        """
        strict = get_settings().strict_validation
        try:
            validated = self.adapter.validate_python(value, strict=strict)
        except ValidationError as exc:
            raise ContextShapeError(
                f"{error_name}: context does not match declared shape: {exc}",
                error_name=error_name,
            ) from exc
        return self.adapter.dump_python(validated, mode="json")

    def conforms(self, stored: Any) -> bool:
        """Check that an already stored (JSON form) context fits the shape.

        Stored contexts hold JSON data (ISO strings rather than datetimes,
        dicts rather than models), so they are validated in lax mode and must
        dump back to exactly the same data.
        """
        try:
            validated = self.adapter.validate_python(stored, strict=False)
        except ValidationError:
            return False
        return self.adapter.dump_python(validated, mode="json") == stored


# Returns a description of how a tagged error departs from a kind, or None.
KindCheck = Callable[[TaggedError], str | None]


@dataclass(frozen=True, slots=True)
class CauseShape:
    """Declared cause kinds of one error kind.

    Attributes:
        kinds: Allowed cause names, or None when any tagged error is allowed.
        optional: True when the cause may be absent.
        checks: Per-name conformance checks for kinds referenced through
            their constructors or factories. Kinds referenced by name alone
            are matched on name only.
    """

    kinds: frozenset[str] | None
    optional: bool
    checks: Mapping[str, KindCheck] = field(default_factory=dict)

    @classmethod
    def declare(cls, kinds: Iterable[Any], *, error_name: str) -> "CauseShape":
        """Build a cause declaration from kind references.

        Each reference is TaggedError/AnyTaggedError (any kind), None
        (absence allowed), an error-name string, or anything exposing an
        ``error_name`` attribute (constructors and factories). ``X | None``
        unions are flattened.

        Raises:
            InvalidShapeError: If no kind is given or a reference is not
                understood.
        """
        names: set[str] = set()
        checks: dict[str, KindCheck] = {}
        any_kind = False
        optional = False
        for reference in kinds:
            for member in _union_members(reference):
                if member in _NONE_TYPES:
                    optional = True
                elif member is TaggedError:
                    any_kind = True
                elif isinstance(member, str):
                    names.add(validate_error_name(member))
                elif isinstance(getattr(member, "error_name", None), str):
                    names.add(member.error_name)
                    check = getattr(member, "mismatch", None)
                    if callable(check):
                        checks[member.error_name] = check
                else:
                    raise InvalidShapeError(
                        f"{error_name}: unsupported cause kind {member!r}",
                        error_name=error_name,
                    )
        if not any_kind and not names:
            raise InvalidShapeError(
                f"{error_name}: with_cause needs at least one cause kind",
                error_name=error_name,
            )
        if any_kind:
            return cls(kinds=None, optional=optional)
        return cls(kinds=frozenset(names), optional=optional, checks=checks)

    def validate(self, value: Any, *, error_name: str) -> TaggedError:
        """Check a call-site cause and return it unchanged.

        A cause of a kind referenced through its constructor must also match
        that kind's declared context and cause, so hand-built or decoded
        values carrying the right name but the wrong shape are rejected.

        Raises:
            CauseShapeError: If value is not a TaggedError of an allowed kind,
                or does not match the shape of its kind.
        """
        if not isinstance(value, TaggedError):
            raise CauseShapeError(
                f"{error_name}: cause must be a TaggedError, got {type(value).__name__}",
                error_name=error_name,
            )
        if self.kinds is not None and value.name not in self.kinds:
            allowed = ", ".join(sorted(self.kinds))
            raise CauseShapeError(
                f"{error_name}: cause must be one of {allowed}, got {value.name}",
                error_name=error_name,
            )
        check = self.checks.get(value.name)
        if check is not None:
            problem = check(value)
            if problem is not None:
                raise CauseShapeError(
                    f"{error_name}: cause {value.name} {problem}",
                    error_name=error_name,
                )
        return value
