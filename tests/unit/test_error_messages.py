"""Unit tests for error message helpers."""

import pytest

from wellcrafted.error.json_safety import is_json_safe
from wellcrafted.error.messages import extract_error_message, summarize_exception


@pytest.mark.unit
class TestExtractErrorMessage:
    """Test extract_error_message."""

    def test_exception(self):
        """Test exceptions yield their text."""
        assert extract_error_message(ValueError("Something went wrong")) == "Something went wrong"

    def test_exception_without_text(self):
        """Test empty exceptions fall back to the class name."""
        assert extract_error_message(KeyboardInterrupt()) == "KeyboardInterrupt"

    def test_string(self):
        """Test strings are returned as-is."""
        assert extract_error_message("String error") == "String error"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({"message": "from message"}, "from message"),
            ({"error": "from error"}, "from error"),
            ({"description": "from description"}, "from description"),
            ({"message": 3, "error": "from error"}, "from error"),
        ],
    )
    def test_mapping_message_keys(self, value, expected):
        """Test common message keys are preferred in order."""
        assert extract_error_message(value) == expected

    def test_mapping_falls_back_to_json(self):
        """Test other mappings are JSON encoded."""
        assert (
            extract_error_message({"code": 500, "details": "Server error"})
            == '{"code": 500, "details": "Server error"}'
        )

    def test_unencodable_mapping_falls_back_to_repr(self):
        """Test mappings json cannot encode use repr."""
        value = {"when": object}

        assert extract_error_message(value) == repr(value)

    def test_other_values(self):
        """Test everything else is str()'d."""
        assert extract_error_message(404) == "404"
        assert extract_error_message(None) == "None"


@pytest.mark.unit
class TestSummarizeException:
    """Test summarize_exception."""

    def test_summary_is_json_safe(self):
        """Test summaries can be folded into context."""
        summary = summarize_exception(PermissionError("denied"))

        assert summary == {"type": "PermissionError", "message": "denied"}
        assert is_json_safe(summary)
