"""Wire schemas for tagged errors and Results.

Pydantic schemas for values decoded from JSON on the far side of a process
or network boundary. Includes:
- TaggedErrorPayload (``{name, message, context?, cause?}``)
- ResultPayload (``{data, error}``)
- Conversion back to TaggedError / Success / Failure

Usage:
    payload = json.loads(body)
    result = parse_result(payload)
    if is_failure(result):
        ...
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator

from wellcrafted.core.result import Failure, Result, Success
from wellcrafted.error.tagged_error import TaggedError

EXPECTED_OBJECT = "Expected object"
EXPECTED_DATA_ERROR_PROPS = "Expected object with 'data' and 'error' properties"
INVALID_RESULT = "Invalid Result: exactly one of 'data' or 'error' must be null"


# =============================================================================
# Tagged Error Schemas
# =============================================================================


class TaggedErrorPayload(BaseModel):
    """One decoded link of a tagged-error chain.

    ``cause`` keeps the nested payload undecoded; ``to_tagged_error()``
    validates each link with this same model in a loop, so cause chains of
    any depth decode without recursion.

    Attributes:
        name: Discriminant of the error kind.
        message: Human-readable message.
        context: JSON context, absent when None.
        cause: Raw payload of the tagged error that caused this one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Error kind discriminant")
    message: str = Field(..., description="Human-readable message")
    context: JsonValue | None = Field(default=None, description="Structured context")
    cause: dict[str, Any] | None = Field(
        default=None, description="Payload of the tagged error that caused this one"
    )

    def links(self) -> list["TaggedErrorPayload"]:
        """Validate the cause chain, outermost link first.

        Raises:
            pydantic.ValidationError: If any nested cause is malformed.
        """
        links = [self]
        while links[-1].cause is not None:
            links.append(TaggedErrorPayload.model_validate(links[-1].cause))
        return links

    def to_tagged_error(self) -> TaggedError:
        """Convert to a TaggedError, innermost cause first."""
        *outer, innermost = self.links()
        error = innermost.to_link(cause=None)
        for link in reversed(outer):
            error = link.to_link(cause=error)
        return error

    def to_link(self, *, cause: TaggedError | None) -> TaggedError:
        """Convert this link alone, attaching an already converted cause."""
        return TaggedError(
            name=self.name,
            message=self.message,
            context=self.context,
            cause=cause,
        )


# =============================================================================
# Result Schemas
# =============================================================================


class ResultPayload(BaseModel):
    """Decoded Result in ``{data, error}`` form.

    Exactly one of ``data`` / ``error`` may be non-null. When both are null
    the payload is a success carrying None.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    data: Any = Field(..., description="Success value, null for failures")
    error: TaggedErrorPayload | None = Field(..., description="Failure error, null for successes")

    @model_validator(mode="before")
    @classmethod
    def check_variant(cls, value: Any) -> Any:
        """
        Enforce the two-variant structure before field validation.

        Args:
            value: Raw decoded payload.

        Returns:
            The payload, unchanged.

        Raises:
            ValueError: If the payload is not a well-formed Result.
        """
        if not isinstance(value, dict):
            raise ValueError(EXPECTED_OBJECT)
        if "data" not in value or "error" not in value:
            raise ValueError(EXPECTED_DATA_ERROR_PROPS)
        if value["data"] is not None and value["error"] is not None:
            raise ValueError(INVALID_RESULT)
        return value

    def to_result(self) -> Result[Any, TaggedError]:
        """Convert to Success or Failure."""
        if self.error is not None:
            return Failure(error=self.error.to_tagged_error())
        return Success(value=self.data)


def parse_tagged_error(data: Any) -> TaggedError:
    """Validate decoded JSON as a tagged error.

    Raises:
        pydantic.ValidationError: If data is not a tagged-error payload.
    """
    return TaggedErrorPayload.model_validate(data).to_tagged_error()


def parse_result(data: Any) -> Result[Any, TaggedError]:
    """Validate decoded JSON as a Result.

    Raises:
        pydantic.ValidationError: If data is not a Result payload.
    """
    return ResultPayload.model_validate(data).to_result()
