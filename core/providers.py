"""Text generation provider interface and the Gemini implementation."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

from core.models import GenerationParameters
from core.settings import API_KEY_ENV_VARS, DEFAULT_MODEL, GeneratorSettings, resolve_api_key

logger = logging.getLogger(__name__)


class TextProvider(ABC):
    """Base interface for text generation providers."""

    provider_name: str = "base"

    @abstractmethod
    def generate(self, prompt: str, params: GenerationParameters) -> str | None:
        """Return the generated text, or None when the provider produced none.

        Transport, auth and validation failures propagate as exceptions.
        """
        ...

    def timed_generate(self, prompt: str, params: GenerationParameters) -> tuple[str | None, float]:
        start = time.time()
        text = self.generate(prompt, params)
        elapsed = time.time() - start
        return text, elapsed


class GeminiTextProvider(TextProvider):
    """Google Gemini provider using the google-genai SDK."""

    provider_name = "gemini"

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL) -> None:
        self.api_key = resolve_api_key(api_key, *API_KEY_ENV_VARS)
        self.model = model
        self._client = None
        if not self.api_key:
            raise ValueError(
                "Gemini API key is required. Set GEMINI_API_KEY or pass api_key."
            )

    def _get_client(self):
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, params: GenerationParameters) -> str | None:
        client = self._get_client()
        logger.info("Generating card text via Gemini model=%s", self.model)

        response = client.models.generate_content(
            model=self.model,
            contents=[{"role": "user", "parts": [{"text": prompt}]}],
            config=params.to_config(),
        )

        text = response.text
        if not text or not text.strip():
            self._log_empty_response(response)
        return text

    @staticmethod
    def _log_empty_response(response) -> None:
        candidates = getattr(response, "candidates", None) or []
        finish_reason = getattr(candidates[0], "finish_reason", None) if candidates else None
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        usage = getattr(response, "usage_metadata", None)
        logger.warning(
            "Gemini returned no text: finish_reason=%s block_reason=%s "
            "candidates=%d thoughts_tokens=%s output_tokens=%s",
            finish_reason,
            block_reason,
            len(candidates),
            getattr(usage, "thoughts_token_count", None),
            getattr(usage, "candidates_token_count", None),
        )


def build_provider(settings: GeneratorSettings) -> TextProvider:
    """Construct the configured provider from settings."""
    return GeminiTextProvider(api_key=settings.api_key, model=settings.model)
