"""Exception used when a failure is explicitly unwrapped."""

from typing import Any


class UnwrapError(Exception):
    """Raised by unwrap()/resolve() when handed a Failure.

    The domain error is carried unchanged so callers catching this at a
    boundary can still inspect it.

    Attributes:
        error: The error held by the Failure.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"called unwrap on Failure: {error}")
        self.error = error
