"""Card generator: one fixed prompt in, one normalized JSON envelope out."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Callable

from core.errors import (
    MISSING_CREDENTIAL_MESSAGE,
    EmptyResultError,
    ErrorKind,
    classify_provider_error,
)
from core.models import CardResponse, GenerationParameters
from core.providers import TextProvider, build_provider
from core.settings import GeneratorSettings
from prompts.templates import CARD_PROMPT

logger = logging.getLogger(__name__)


class CardGenerator:
    """Generates one idea card per call to :meth:`handle`.

    The provider is built lazily, and only once the credential check has
    passed. Pass ``provider`` (or ``provider_factory``) to substitute the
    upstream call, e.g. in tests.
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        provider: TextProvider | None = None,
        provider_factory: Callable[[GeneratorSettings], TextProvider] | None = None,
        prompt: str = CARD_PROMPT,
    ) -> None:
        self.settings = settings
        self.prompt = prompt
        self._provider = provider
        self._provider_factory = provider_factory or build_provider

    @property
    def parameters(self) -> GenerationParameters:
        return GenerationParameters(
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_output_tokens,
            thinking_budget=self.settings.thinking_budget,
        )

    def _get_provider(self) -> TextProvider:
        if self._provider is None:
            self._provider = self._provider_factory(self.settings)
        return self._provider

    def generate_card_text(self) -> str:
        """Call the provider once and return the trimmed card text.

        Raises EmptyResultError when the provider yields no usable text.
        Provider exceptions propagate unchanged.
        """
        provider = self._get_provider()
        text, elapsed = provider.timed_generate(self.prompt, self.parameters)
        logger.info("Provider %s answered in %.2fs", provider.provider_name, elapsed)

        if text is None or not text.strip():
            raise EmptyResultError()
        return text.strip()

    def _redact(self, text: str) -> str:
        """Mask the API key in text bound for the log."""
        key = self.settings.api_key.strip()
        return text.replace(key, "***") if key else text

    def handle(self, event: dict[str, Any] | None = None) -> CardResponse:
        """Handle one inbound request. The request itself is not inspected."""
        if not self.settings.has_api_key:
            logger.error("%s: Gemini API key is not configured", ErrorKind.MISSING_CREDENTIAL.value)
            return CardResponse.failure(MISSING_CREDENTIAL_MESSAGE)

        try:
            card_text = self.generate_card_text()
        except EmptyResultError as e:
            logger.warning("%s: %s", e.kind.value, e)
            return CardResponse.failure(str(e))
        except Exception as e:
            logger.error(
                "%s: Gemini API error\n%s",
                ErrorKind.PROVIDER_CALL_FAILURE.value,
                self._redact("".join(traceback.format_exception(type(e), e, e.__traceback__))),
            )
            return CardResponse.failure(classify_provider_error(e))

        return CardResponse.success(card_text)
