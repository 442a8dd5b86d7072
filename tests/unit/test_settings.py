import importlib
from dataclasses import astuple

import pytest

from shopping_classifier.config import settings as settings_module
from shopping_classifier.config.settings import (
    DEFAULT_API_URL,
    SETTINGS,
    ClassifierSettings,
    update_from_kwargs,
)


def test_trailing_slash_stripped():
    settings = ClassifierSettings(api_url="https://classifier.example.com///")
    assert settings.api_url == "https://classifier.example.com"
    assert settings.classify_url == "https://classifier.example.com/classify"


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        SETTINGS.api_url = "http://elsewhere"  # type: ignore[misc]


def test_update_from_kwargs_overrides():
    settings = update_from_kwargs(api_url="http://remote:9000/", request_timeout_sec="5", log_level="debug")
    assert settings.api_url == "http://remote:9000"
    assert settings.request_timeout_sec == 5.0
    assert settings.log_level == "DEBUG"
    assert settings.model_card_url == SETTINGS.model_card_url


def test_update_from_kwargs_none_keeps_current():
    settings = update_from_kwargs(api_url=None, request_timeout_sec=None)
    assert astuple(settings) == astuple(settings_module.SETTINGS)


class TestEnvironment:
    @pytest.fixture
    def reload_settings(self, monkeypatch):
        for name in ("CLASSIFIER_API_URL", "VITE_API_URL", "CLASSIFIER_TIMEOUT_SEC", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        yield lambda: importlib.reload(settings_module)
        monkeypatch.undo()
        importlib.reload(settings_module)

    def test_local_development_fallback(self, reload_settings):
        module = reload_settings()
        # A developer's .env could still define the URL.
        if not module.os.getenv("CLASSIFIER_API_URL") and not module.os.getenv("VITE_API_URL"):
            assert module.SETTINGS.api_url == DEFAULT_API_URL

    def test_env_overrides(self, reload_settings, monkeypatch):
        monkeypatch.setenv("CLASSIFIER_API_URL", "https://api.example.com/")
        monkeypatch.setenv("CLASSIFIER_TIMEOUT_SEC", "30")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        module = reload_settings()

        assert module.SETTINGS.api_url == "https://api.example.com"
        assert module.SETTINGS.request_timeout_sec == 30.0
        assert module.SETTINGS.log_level == "WARNING"

    def test_vite_variable_is_honoured(self, reload_settings, monkeypatch):
        monkeypatch.setenv("VITE_API_URL", "https://vite.example.com")
        module = reload_settings()
        assert module.SETTINGS.api_url == "https://vite.example.com"
