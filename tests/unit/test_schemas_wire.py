"""Unit tests for wire schemas.

Tests cover:
- TaggedErrorPayload validation and conversion
- ResultPayload variant checks and error messages
- parse_result round-trip with Result.to_dict()
"""

import json

import pytest
from pydantic import ValidationError

from wellcrafted.core.result import Failure, Success, is_failure
from wellcrafted.error import TaggedError, create_error
from wellcrafted.schemas import (
    ResultPayload,
    TaggedErrorPayload,
    parse_result,
    parse_tagged_error,
)
from wellcrafted.schemas.wire_schemas import (
    EXPECTED_DATA_ERROR_PROPS,
    EXPECTED_OBJECT,
    INVALID_RESULT,
)


@pytest.mark.unit
class TestTaggedErrorPayload:
    """Test TaggedErrorPayload schema."""

    def test_minimal_payload(self):
        """Test name and message are enough."""
        payload = TaggedErrorPayload.model_validate({"name": "DbError", "message": "down"})

        assert payload.context is None
        assert payload.cause is None
        assert payload.to_tagged_error() == TaggedError(name="DbError", message="down")

    def test_nested_cause(self):
        """Test causes are converted recursively."""
        error = parse_tagged_error(
            {
                "name": "RepoError",
                "message": "failed",
                "context": {"entity": "User", "ids": [1, 2]},
                "cause": {"name": "DbError", "message": "down"},
            }
        )

        assert error.cause == TaggedError(name="DbError", message="down")
        assert error.context == {"entity": "User", "ids": [1, 2]}

    def test_empty_name_rejected(self):
        """Test an empty discriminant is invalid."""
        with pytest.raises(ValidationError):
            parse_tagged_error({"name": "", "message": "down"})

    def test_non_string_message_rejected(self):
        """Test message must be a string."""
        with pytest.raises(ValidationError):
            parse_tagged_error({"name": "DbError", "message": 42})

    def test_invalid_nested_cause_rejected(self):
        """Test malformed causes fail validation."""
        with pytest.raises(ValidationError):
            parse_tagged_error({"name": "RepoError", "message": "x", "cause": {"name": "DbError"}})

    def test_deeply_nested_cause_rejected(self):
        """Test a malformed link far down the chain is still rejected."""
        payload: dict = {"name": "DbError", "message": "down", "stack": "..."}
        for depth in range(400):
            payload = {"name": "WrapError", "message": f"level {depth}", "cause": payload}

        with pytest.raises(ValidationError):
            parse_tagged_error(payload)

    def test_long_chain_decodes(self):
        """Test chains far beyond pydantic's recursion guard decode."""
        payload: dict = {"name": "DbError", "message": "down", "context": {"host": "db"}}
        for depth in range(1000):
            payload = {"name": "WrapError", "message": f"level {depth}", "cause": payload}

        error = parse_tagged_error(payload)

        links = error.chain()
        assert len(links) == 1001
        assert links[0].message == "level 999"
        assert links[-1] == TaggedError(name="DbError", message="down", context={"host": "db"})

    def test_links_validate_each_cause(self):
        """Test links() returns one payload per chain link, outermost first."""
        payload = TaggedErrorPayload.model_validate(
            {
                "name": "RepoError",
                "message": "failed",
                "cause": {"name": "DbError", "message": "down"},
            }
        )

        assert [link.name for link in payload.links()] == ["RepoError", "DbError"]

    def test_payload_is_frozen(self):
        """Test decoded payloads are immutable."""
        payload = TaggedErrorPayload(name="DbError", message="down")

        with pytest.raises(ValidationError):
            payload.name = "OtherError"


@pytest.mark.unit
class TestResultPayload:
    """Test ResultPayload schema."""

    def test_success_payload(self):
        """Test a null error decodes as Success."""
        assert parse_result({"data": {"id": 1}, "error": None}) == Success(value={"id": 1})

    def test_failure_payload(self):
        """Test a non-null error decodes as Failure."""
        result = parse_result({"data": None, "error": {"name": "DbError", "message": "down"}})

        assert is_failure(result)
        assert result.error == TaggedError(name="DbError", message="down")

    def test_both_null_is_success_of_none(self):
        """Test {data: null, error: null} is a success carrying None."""
        assert parse_result({"data": None, "error": None}) == Success(value=None)

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ([1, 2], EXPECTED_OBJECT),
            ("text", EXPECTED_OBJECT),
            ({"data": 1}, EXPECTED_DATA_ERROR_PROPS),
            ({"error": None}, EXPECTED_DATA_ERROR_PROPS),
            ({"data": 1, "error": {"name": "DbError", "message": "down"}}, INVALID_RESULT),
        ],
    )
    def test_invalid_payloads(self, payload, message):
        """Test malformed Results are rejected with a specific message."""
        with pytest.raises(ValidationError) as exc_info:
            ResultPayload.model_validate(payload)

        assert message in str(exc_info.value)

    def test_extra_keys_rejected(self):
        """Test unknown top-level keys are rejected."""
        with pytest.raises(ValidationError):
            parse_result({"data": 1, "error": None, "meta": {}})


@pytest.mark.unit
class TestRoundTrip:
    """Test decoding what Result.to_dict() produces."""

    def test_failure_round_trip(self, file_error):
        """Test a failure survives encode and decode."""
        original = file_error.err(context={"path": "/tmp/x"})

        decoded = parse_result(json.loads(json.dumps(original.to_dict())))

        assert decoded == original

    def test_success_round_trip(self):
        """Test a JSON-safe success survives encode and decode."""
        original = Success(value={"items": [1, 2.5, "three", None, True]})

        assert parse_result(json.loads(json.dumps(original.to_dict()))) == original

    def test_failure_with_cause_chain(self, db_error):
        """Test causes survive the Result envelope."""
        RepoErr = (
            create_error("RepoError")
            .with_cause(db_error.error)
            .with_message(lambda e: "repo failed")
            .err
        )
        original = RepoErr(cause=db_error.error())

        decoded = parse_result(original.to_dict())

        assert isinstance(decoded, Failure)
        assert decoded.error.cause.name == "DbError"
        assert decoded == original
