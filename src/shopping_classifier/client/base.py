from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shopping_classifier.session.models import ClassificationRequest, ClassificationResult


class ClassifierClient(ABC):
    """Abstract interface for the remote relationship classifier."""

    @abstractmethod
    def classify(self, request: ClassificationRequest) -> ClassificationResult:  # noqa: D401
        """Classify one (query, description) pair or raise RequestError."""


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def get_client(kind: str = "http", **kwargs: Any) -> "ClassifierClient":
    """Return a ClassifierClient for *kind* (currently only ``'http'``)."""

    kind = kind.lower().strip()
    if kind == "http":
        from .http import HttpClassifierClient

        return HttpClassifierClient(**kwargs)

    raise ValueError(f"Unknown classifier client: {kind}")
