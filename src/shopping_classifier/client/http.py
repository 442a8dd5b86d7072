"""HTTP client for the ``POST /classify`` endpoint.

Every failure mode (non-2xx status, DNS/connect/timeout, unparseable body)
collapses into a single RequestError. The cause is logged and chained, never
shown to the operator.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .base import ClassifierClient
from shopping_classifier.config.settings import SETTINGS
from shopping_classifier.session.errors import RequestError
from shopping_classifier.session.models import ClassificationRequest, ClassificationResult

logger = logging.getLogger(__name__)


class HttpClassifierClient(ClassifierClient):
    """Single-attempt JSON client around a ``requests.Session``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or SETTINGS.api_url).rstrip("/")
        self.timeout = SETTINGS.request_timeout_sec if timeout is None else timeout
        self._session = session or requests.Session()

    @property
    def classify_url(self) -> str:
        return f"{self.base_url}/classify"

    def classify(self, request: ClassificationRequest) -> ClassificationResult:  # type: ignore[override]
        try:
            response = self._session.post(
                self.classify_url,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Classifier unreachable at %s: %s", self.classify_url, exc)
            raise RequestError() from exc

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Classifier API error: %s %s", response.status_code, response.reason
            )
            raise RequestError()

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Classifier returned a non-JSON body")
            raise RequestError() from exc

        try:
            result = ClassificationResult.from_payload(payload)
        except RequestError:
            logger.warning("Classifier response missing relationship/confidence: %r", payload)
            raise

        logger.debug(
            "Classified %r → %s (%.3f)", request.query, result.relationship, result.confidence
        )
        return result

    def close(self) -> None:
        self._session.close()
