"""Configuration loader helpers."""

from .settings import SETTINGS, ClassifierSettings, update_from_kwargs

__all__ = ["SETTINGS", "ClassifierSettings", "update_from_kwargs"]
