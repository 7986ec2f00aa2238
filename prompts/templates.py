"""Prompt templates for idea card generation."""

from __future__ import annotations

# --- Card prompt ---

CARD_PROMPT = (
    "Generate a single, unique, creative constraint or unexpected idea starter "
    "for a design thinking workshop. The output must be concise, highly specific, "
    "and actionable. Maximum length is 7 words. Must be a standalone phrase. "
    "Ensure the context is professional yet surprising (e.g., 'Involve a quantum "
    "computer' or 'Be inspired by the chaos of a toddler's room')."
)
