"""Runtime configuration for the classifier front end.

Only parameters that the current codebase uses are kept.
• CLASSIFIER_API_URL     – base URL of the classification service.
• CLASSIFIER_TIMEOUT_SEC – per-request timeout; the first call may hit a cold start.
• LOG_LEVEL              – level passed to ``logging.basicConfig`` by entry points.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_MODEL_CARD_URL = (
    "https://huggingface.co/yahid/distilbert-base-uncased-finetuned-amazon-kdd"
)


def _default_api_url() -> str:
    return os.getenv("CLASSIFIER_API_URL") or os.getenv("VITE_API_URL") or DEFAULT_API_URL


@dataclass(frozen=True)
class ClassifierSettings:
    """Immutable container for runtime parameters."""

    # --- Remote service ---------------------------------------------------
    api_url: str = _default_api_url()
    request_timeout_sec: float = float(os.getenv("CLASSIFIER_TIMEOUT_SEC", "120"))

    # --- Presentation -----------------------------------------------------
    model_card_url: str = os.getenv("CLASSIFIER_MODEL_URL", DEFAULT_MODEL_CARD_URL)

    # --- Logging ----------------------------------------------------------
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self):
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @property
    def classify_url(self) -> str:
        return f"{self.api_url}/classify"


# Singleton used by most callers
SETTINGS = ClassifierSettings()


def update_from_kwargs(**overrides) -> ClassifierSettings:
    """Return a new ClassifierSettings with supplied overrides.

    ``None`` values are treated as "not supplied" so CLI flags can be passed
    through unconditionally.
    """

    def pick(name: str):
        value = overrides.get(name)
        return getattr(SETTINGS, name) if value is None else value

    return ClassifierSettings(
        api_url=pick("api_url"),
        request_timeout_sec=float(pick("request_timeout_sec")),
        model_card_url=pick("model_card_url"),
        log_level=str(pick("log_level")).upper(),
    )
