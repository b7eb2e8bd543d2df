"""
Thin wrapper around the Gemini text generation API.
"""

import logging
from functools import lru_cache

from django.conf import settings
from google import genai

logger = logging.getLogger(__name__)


class AIProviderError(Exception):
    """Raised when the text generation provider fails or is not configured."""
    pass


@lru_cache(maxsize=4)
def _client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def generate_text(prompt: str) -> str:
    """
    Send a single prompt and return the generated text.

    Raises:
        AIProviderError: If no API key is configured or the call fails
    """
    if not settings.GEMINI_API_KEY:
        raise AIProviderError("GEMINI_API_KEY is not configured")

    try:
        response = _client(settings.GEMINI_API_KEY).models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=prompt,
        )
    except Exception as e:
        logger.exception("Gemini request failed")
        raise AIProviderError(str(e)) from e

    text = (response.text or '').strip() if response else ''
    if not text:
        raise AIProviderError("Empty response from model")
    return text
