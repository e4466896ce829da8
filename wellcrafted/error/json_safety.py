"""JSON-safety checks for tagged-error payloads.

Tagged errors cross process, network and log boundaries as plain JSON, so
every value they carry must survive ``json.loads(json.dumps(value))``
unchanged. That rules out tuples (they come back as lists), non-string dict
keys, NaN/Infinity, datetimes and arbitrary objects. Encode dates as ISO
strings and summarize upstream exceptions before attaching them.
"""

import math
from typing import Any

from wellcrafted.core.errors import NonSerializableValueError

_SCALARS = (str, int, float, bool)


def _find_unsafe(value: Any, path: str) -> tuple[str, str] | None:
    """Return (path, reason) for the first unsafe value, or None."""
    if value is None:
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return path, f"non-finite float {value!r}"
        return None
    if isinstance(value, _SCALARS):
        return None
    if isinstance(value, list):
        for index, item in enumerate(value):
            found = _find_unsafe(item, f"{path}[{index}]")
            if found is not None:
                return found
        return None
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                return path, f"non-string key {key!r}"
            found = _find_unsafe(item, f"{path}.{key}")
            if found is not None:
                return found
        return None
    return path, f"unsupported type {type(value).__name__}"


def is_json_safe(value: Any) -> bool:
    """Check whether a value survives a lossless JSON round-trip."""
    return _find_unsafe(value, "$") is None


def ensure_json_safe(value: Any, *, path: str = "$", error_name: str | None = None) -> Any:
    """Return the value unchanged if it is JSON-safe.

    Args:
        value: Value to check.
        path: Name of the value's root in error messages (e.g. "context").
        error_name: Kind involved, reported on the raised exception.

    Returns:
        The value, unchanged.

    Raises:
        NonSerializableValueError: Naming the JSON path of the first unsafe
            value and why it is unsafe.
    """
    found = _find_unsafe(value, path)
    if found is not None:
        bad_path, reason = found
        raise NonSerializableValueError(
            f"{bad_path} is not JSON-safe: {reason}",
            path=bad_path,
            error_name=error_name,
        )
    return value
