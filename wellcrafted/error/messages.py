"""Helpers for turning arbitrary failures into JSON-safe text.

Mostly used inside ``map_error`` callbacks of the try wrappers, where the
caught value is an exception of unknown type that must be summarized before
it can be folded into a tagged error's context.
"""

import json
from collections.abc import Mapping
from typing import Any

_MESSAGE_KEYS = ("message", "error", "description")


def extract_error_message(error: Any) -> str:
    """Extract a readable message from an unknown error value.

    Args:
        error: Exception, string, mapping or anything else.

    Returns:
        - exceptions: ``str(exc)``, or the class name when that is empty
        - strings: the string itself
        - mappings: the first string ``message``/``error``/``description``
          value, otherwise the JSON encoding
        - lists: the JSON encoding
        - anything else: ``str(error)``

    Example:
        >>> extract_error_message(ValueError("bad input"))
        'bad input'
        >>> extract_error_message({"code": 500, "details": "Server error"})
        '{"code": 500, "details": "Server error"}'
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__

    if isinstance(error, str):
        return error

    if isinstance(error, Mapping):
        for key in _MESSAGE_KEYS:
            candidate = error.get(key)
            if isinstance(candidate, str):
                return candidate

    if isinstance(error, (Mapping, list)):
        try:
            return json.dumps(error)
        except (TypeError, ValueError):
            return repr(error)

    return str(error)


def summarize_exception(exc: BaseException) -> dict[str, str]:
    """Summarize an exception as JSON-safe data.

    Args:
        exc: Exception to summarize.

    Returns:
        dict: ``{"type": <class name>, "message": <extracted message>}``.
    """
    return {"type": type(exc).__name__, "message": extract_error_message(exc)}
