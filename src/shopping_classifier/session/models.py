"""Value types exchanged between the session, the client and the UI."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping

from .errors import RequestError, ValidationError


@dataclass(frozen=True)
class InputPair:
    """Raw operator input, untrimmed."""

    query: str = ""
    product_description: str = ""

    def with_query(self, query: str) -> "InputPair":
        return replace(self, query=query)

    def with_description(self, description: str) -> "InputPair":
        return replace(self, product_description=description)

    @property
    def is_complete(self) -> bool:
        """True when both fields are non-empty after trimming."""
        return bool(self.query.strip()) and bool(self.product_description.strip())


@dataclass(frozen=True)
class ClassificationRequest:
    """Trimmed, non-empty payload for ``POST /classify``."""

    query: str
    product_description: str

    @classmethod
    def from_inputs(cls, inputs: InputPair) -> "ClassificationRequest":
        """Build a request from *inputs* or raise ValidationError."""
        query = inputs.query.strip()
        description = inputs.product_description.strip()
        if not query or not description:
            raise ValidationError()
        return cls(query=query, product_description=description)

    def to_payload(self) -> Dict[str, str]:
        return {"query": self.query, "product_description": self.product_description}


@dataclass(frozen=True)
class ClassificationResult:
    relationship: str
    confidence: float

    @classmethod
    def from_payload(cls, payload: Any) -> "ClassificationResult":
        """Parse a response body; anything unusable raises RequestError."""
        if not isinstance(payload, Mapping):
            raise RequestError()
        relationship = payload.get("relationship")
        confidence = payload.get("confidence")
        if not isinstance(relationship, str):
            raise RequestError()
        # bool is an int subclass but never a valid score
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            raise RequestError()
        try:
            confidence = float(confidence)
        except OverflowError as exc:
            raise RequestError() from exc
        # NaN and Infinity literals are accepted by the JSON parser
        if not math.isfinite(confidence):
            raise RequestError()
        return cls(relationship=relationship, confidence=confidence)

    def to_dict(self) -> Dict[str, Any]:
        return {"relationship": self.relationship, "confidence": self.confidence}
