"""Naming convention for tagged-error kinds.

Every kind is named with an "Error" suffix ("NetworkError"). Its
Result-wrapped constructor takes the same name with "Err" in place of the
suffix ("NetworkErr").
"""

from wellcrafted.core.errors import InvalidErrorNameError

ERROR_SUFFIX = "Error"
ERR_SUFFIX = "Err"


def validate_error_name(name: object) -> str:
    """Check that a kind name follows the "Error" suffix convention.

    Args:
        name: Candidate name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidErrorNameError: If name is not a str ending in "Error".
    """
    if not isinstance(name, str) or not name.endswith(ERROR_SUFFIX):
        raise InvalidErrorNameError(
            f"Error kind name must be a string ending in {ERROR_SUFFIX!r}, got {name!r}",
            error_name=name if isinstance(name, str) else None,
        )
    return name


def to_err_name(name: str) -> str:
    """Derive the Result-wrapped constructor name.

    Examples:
        >>> to_err_name("NetworkError")
        'NetworkErr'
        >>> to_err_name("Error")
        'Err'
    """
    validate_error_name(name)
    return name[: -len(ERROR_SUFFIX)] + ERR_SUFFIX
