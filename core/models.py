"""Data models for the idea card generator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from core.settings import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_THINKING_BUDGET,
)

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
}


@dataclass(frozen=True)
class GenerationParameters:
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    thinking_budget: int = DEFAULT_THINKING_BUDGET

    def to_config(self) -> dict[str, Any]:
        """Render as a google-genai ``GenerateContentConfig`` dict."""
        return {
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
            "thinking_config": {"thinking_budget": self.thinking_budget},
        }


@dataclass
class CardResponse:
    """JSON envelope returned to the caller: ``{"cardText": ...}`` or ``{"error": ...}``."""

    status_code: int
    body: dict[str, str]
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, card_text: str) -> CardResponse:
        return cls(
            status_code=200,
            body={"cardText": card_text},
            headers={**JSON_HEADERS, **CORS_HEADERS},
        )

    @classmethod
    def failure(cls, message: str, status_code: int = 500) -> CardResponse:
        return cls(status_code=status_code, body={"error": message}, headers=dict(JSON_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        """Serverless function result with a JSON-encoded body."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": json.dumps(self.body),
        }
