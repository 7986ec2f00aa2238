from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.providers import GeminiTextProvider
from core.settings import GeneratorSettings, resolve_api_key


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_set(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert resolve_api_key("", "GEMINI_API_KEY", "GOOGLE_API_KEY") == ""


def test_settings_support_google_api_key_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    settings = GeneratorSettings.from_env()
    assert settings.has_api_key is True
    assert settings.api_key == "google-value"


def test_settings_repr_hides_api_key():
    settings = GeneratorSettings(api_key="secret-key-123")
    assert "secret-key-123" not in repr(settings)


def test_gemini_provider_requires_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        GeminiTextProvider(api_key=None)
