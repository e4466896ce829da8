"""Unit tests for the Error -> Err naming convention."""

import pytest

from wellcrafted.core.errors import InvalidErrorNameError
from wellcrafted.error.naming import ERR_SUFFIX, ERROR_SUFFIX, to_err_name, validate_error_name


@pytest.mark.unit
class TestToErrName:
    """Test to_err_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("NetworkError", "NetworkErr"),
            ("ValidationError", "ValidationErr"),
            ("AuthError", "AuthErr"),
            ("ErrorError", "ErrorErr"),
            ("Error", "Err"),
        ],
    )
    def test_replaces_trailing_suffix(self, name, expected):
        """Test only the trailing "Error" is replaced."""
        assert to_err_name(name) == expected

    def test_suffix_constants(self):
        """Test the suffix tokens."""
        assert ERROR_SUFFIX == "Error"
        assert ERR_SUFFIX == "Err"

    def test_rejects_name_without_suffix(self):
        """Test names without the suffix are contract violations."""
        with pytest.raises(InvalidErrorNameError):
            to_err_name("Foo")


@pytest.mark.unit
class TestValidateErrorName:
    """Test validate_error_name."""

    def test_returns_valid_name(self):
        """Test valid names are returned unchanged."""
        assert validate_error_name("FileError") == "FileError"

    @pytest.mark.parametrize("name", ["Foo", "FileErr", "Errors", "fileerror", ""])
    def test_rejects_invalid_names(self, name):
        """Test names not ending in "Error" are rejected."""
        with pytest.raises(InvalidErrorNameError) as exc_info:
            validate_error_name(name)

        assert exc_info.value.error_name == name

    def test_rejects_non_string(self):
        """Test non-string names are rejected."""
        with pytest.raises(InvalidErrorNameError) as exc_info:
            validate_error_name(42)

        assert exc_info.value.error_name is None
