"""Runtime configuration for the card generator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

API_KEY_ENV_VARS: tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.9
DEFAULT_MAX_OUTPUT_TOKENS = 2048
# Reasoning tokens count against max_output_tokens, so it stays off by default.
DEFAULT_THINKING_BUDGET = 0


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "")
        if value.strip():
            return value.strip()
    return ""


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _env_int(name: str, default: int, minimum: int = 0, maximum: int | None = None) -> int:
    """Read an integer in ``[minimum, maximum)``; anything else falls back to ``default``."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if value < minimum or (maximum is not None and value >= maximum):
        logger.warning("Ignoring out-of-range %s=%r, using %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class GeneratorSettings:
    api_key: str = field(default="", repr=False)
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    thinking_budget: int = DEFAULT_THINKING_BUDGET

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    @classmethod
    def from_env(cls, api_key: str | None = None) -> GeneratorSettings:
        """Build settings from the process environment.

        An explicit ``api_key`` overrides GEMINI_API_KEY / GOOGLE_API_KEY.
        Numeric settings that fail to parse or are out of range fall back to
        their defaults. The output token ceiling must be positive and the
        reasoning budget must stay below it, so reasoning can never use up
        the whole output.
        """
        max_output_tokens = _env_int(
            "CARD_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS, minimum=1
        )
        return cls(
            api_key=resolve_api_key(api_key, *API_KEY_ENV_VARS),
            model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
            temperature=_env_float("CARD_TEMPERATURE", DEFAULT_TEMPERATURE),
            max_output_tokens=max_output_tokens,
            thinking_budget=_env_int(
                "CARD_THINKING_BUDGET", DEFAULT_THINKING_BUDGET, maximum=max_output_tokens
            ),
        )
