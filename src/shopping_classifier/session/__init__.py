from .errors import ClassifierError, RequestError, ValidationError  # noqa: F401
from .models import ClassificationRequest, ClassificationResult, InputPair  # noqa: F401
from .machine import (  # noqa: F401
    ClassificationSession,
    Failed,
    Idle,
    PendingRequest,
    Phase,
    Resolved,
    SessionState,
    Submitting,
)

__all__ = [
    "ClassifierError",
    "RequestError",
    "ValidationError",
    "InputPair",
    "ClassificationRequest",
    "ClassificationResult",
    "ClassificationSession",
    "SessionState",
    "Phase",
    "Idle",
    "Submitting",
    "Resolved",
    "Failed",
    "PendingRequest",
]
