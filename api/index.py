"""Serverless entrypoint returning one generated idea card as JSON.

Deploy with all traffic for the card endpoint routed to ``handler``. The
Gemini key is read from GEMINI_API_KEY (or GOOGLE_API_KEY) on every call.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.card_generator import CardGenerator
from core.settings import GeneratorSettings

load_dotenv()
logging.basicConfig(level=logging.INFO)


def handler(event=None, context=None):
    """Serverless function handler."""
    settings = GeneratorSettings.from_env()
    return CardGenerator(settings).handle(event).to_dict()
