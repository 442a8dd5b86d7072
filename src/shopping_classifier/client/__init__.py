from .base import ClassifierClient, get_client  # noqa: F401
from .http import HttpClassifierClient  # noqa: F401

__all__ = [
    "ClassifierClient",
    "HttpClassifierClient",
    "get_client",
]
