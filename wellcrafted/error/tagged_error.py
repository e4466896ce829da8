"""Tagged error value for Railway-Oriented Programming.

TaggedError is the single error value type produced by this library. It is
plain data, discriminated by ``name``, and flows through the system inside
Failure results, never raised.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Frozen dataclass, so instances are immutable once built
- ``context`` and ``cause`` are None when structurally absent, and
  ``to_dict()`` omits them entirely in that case
- Cause chains are walked iteratively (equality, ``to_dict``, decoding),
  so their depth is not bounded by the recursion limit

Usage:
    match error:
        case TaggedError(name="FileError", context={"path": path}):
            ...
        case TaggedError(name="NetworkError"):
            ...
"""

import json
from dataclasses import dataclass
from typing import Any

from wellcrafted.core.errors import ContractViolationError
from wellcrafted.error.json_safety import ensure_json_safe


@dataclass(frozen=True, slots=True, kw_only=True, eq=False)
class TaggedError:
    """Structured, JSON-serializable error value.

    Attributes:
        name: Discriminant identifying the error kind (e.g. "FileError").
        message: Human-readable message.
        context: JSON-safe data describing the failing operation, or None.
        cause: The tagged error that led to this one, or None.

    Raises:
        ContractViolationError: If name/message are not strings or cause is
            not a TaggedError.
        NonSerializableValueError: If context is not JSON-safe.
    """

    name: str
    message: str
    context: Any = None
    cause: "TaggedError | None" = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ContractViolationError(
                f"TaggedError.name must be a non-empty string, got {self.name!r}"
            )
        if not isinstance(self.message, str):
            raise ContractViolationError(
                f"TaggedError.message must be a string, got {type(self.message).__name__}",
                error_name=self.name,
            )
        if self.cause is not None and not isinstance(self.cause, TaggedError):
            raise ContractViolationError(
                f"TaggedError.cause must be a TaggedError, got {type(self.cause).__name__}",
                error_name=self.name,
            )
        ensure_json_safe(self.context, path="context", error_name=self.name)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.name}: {self.message}"

    def chain(self) -> list["TaggedError"]:
        """Return this error followed by its causes, outermost first."""
        links: list[TaggedError] = []
        link: TaggedError | None = self
        while link is not None:
            links.append(link)
            link = link.cause
        return links

    def __eq__(self, other: object) -> bool:
        # Walks the chain in a loop; cause chains may be deeper than the
        # recursion limit.
        if not isinstance(other, TaggedError):
            return NotImplemented
        left: TaggedError | None = self
        right: TaggedError | None = other
        while left is not None and right is not None:
            if left is right:
                return True
            if (left.name, left.message, left.context) != (
                right.name,
                right.message,
                right.context,
            ):
                return False
            left, right = left.cause, right.cause
        return left is None and right is None

    def __hash__(self) -> int:
        return hash((self.name, self.message))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible form, omitting absent context/cause."""
        data: dict[str, Any] = {}
        for link in reversed(self.chain()):
            entry: dict[str, Any] = {"name": link.name, "message": link.message}
            if link.context is not None:
                entry["context"] = link.context
            if data:
                entry["cause"] = data
            data = entry
        return data

    def to_json(self) -> str:
        """Return the JSON encoding of ``to_dict()``."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "TaggedError":
        """Rebuild a TaggedError from its decoded JSON form.

        Args:
            data: Mapping previously produced by ``to_dict()``.

        Returns:
            TaggedError: Equal to the value that produced ``data``.

        Raises:
            pydantic.ValidationError: If data is not a tagged-error payload.
        """
        from wellcrafted.schemas.wire_schemas import parse_tagged_error

        return parse_tagged_error(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "TaggedError":
        """Rebuild a TaggedError from its JSON encoding."""
        return cls.from_dict(json.loads(text))


# Broad cause constraint: "any tagged error".
AnyTaggedError = TaggedError
