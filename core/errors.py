"""Error kinds and user-safe message classification for provider failures."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    EMPTY_OR_FILTERED_RESULT = "empty_or_filtered_result"
    PROVIDER_CALL_FAILURE = "provider_call_failure"


MISSING_CREDENTIAL_MESSAGE = "API Key not configured."
EMPTY_RESULT_MESSAGE = "Gemini response was empty or blocked (e.g., safety filtering)."

AUTHENTICATION_FAILED_MESSAGE = "Authentication failed: API Key may be invalid or restricted."
PERMISSION_DENIED_MESSAGE = "Permission denied: API Key may lack necessary permissions."
INVALID_CONFIGURATION_MESSAGE = "Configuration error: The AI model configuration is invalid."
GENERIC_FAILURE_MESSAGE = "Failed to generate card content due to a server error."

# Checked in order, first match wins.
ERROR_MESSAGE_RULES: list[tuple[str, str]] = [
    ("API key not valid", AUTHENTICATION_FAILED_MESSAGE),
    ("403", PERMISSION_DENIED_MESSAGE),
    ("PERMISSION_DENIED", PERMISSION_DENIED_MESSAGE),
    ("INVALID_ARGUMENT", INVALID_CONFIGURATION_MESSAGE),
]


class EmptyResultError(RuntimeError):
    """The provider answered but produced no usable text."""

    kind = ErrorKind.EMPTY_OR_FILTERED_RESULT

    def __init__(self, message: str = EMPTY_RESULT_MESSAGE) -> None:
        super().__init__(message)


def classify_provider_error(error: BaseException | str) -> str:
    """Map a provider exception (or its message) to a message safe to show callers."""
    message = error if isinstance(error, str) else str(error)
    for needle, user_message in ERROR_MESSAGE_RULES:
        if needle in message:
            return user_message
    return GENERIC_FAILURE_MESSAGE
