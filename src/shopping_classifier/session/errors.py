"""Error types surfaced to the operator.

Both kinds are recoverable and carry a fixed, user-facing message. Causes are
chained for logging but never shown.
"""

from __future__ import annotations

VALIDATION_MESSAGE = (
    "Please fill in both the search query and product description fields."
)
REQUEST_FAILED_MESSAGE = (
    "Failed to classify the relationship. Please check your connection and try again."
)


class ClassifierError(Exception):
    """Base class for errors raised by this package."""

    default_message = "Classification error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class ValidationError(ClassifierError):
    """Submit was attempted with an empty (after trimming) input."""

    default_message = VALIDATION_MESSAGE


class RequestError(ClassifierError):
    """The remote call failed: non-2xx, transport failure or malformed body."""

    default_message = REQUEST_FAILED_MESSAGE
