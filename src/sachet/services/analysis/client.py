"""Text generation clients used for customer-base analysis.

Each client wraps its native SDK directly and exposes a synchronous
``generate()``; the analysis service runs it with ``asyncio.to_thread()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ...config import settings

logger = logging.getLogger(__name__)


class TextGenerationClient(ABC):
    """Base class for text generation backends."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return the model's raw text response for ``prompt``."""
        ...

    @abstractmethod
    def name(self) -> str:
        ...


class GeminiClient(TextGenerationClient):
    """Google Gemini via google-genai SDK, asking for a JSON response body."""

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        from google import genai

        self._client = genai.Client(api_key=api_key or settings.gemini_api_key)
        self._model = model or settings.gemini_model

    def generate(self, prompt: str) -> str:
        from google.genai import types

        response = self._client.models.generate_content(
            model=self._model,
            contents=prompt,
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )
        text = response.text
        if not text:
            raise ValueError("Empty response from Gemini")
        return text

    def name(self) -> str:
        return "gemini"


_client: TextGenerationClient | None = None


def get_text_client() -> TextGenerationClient:
    """Get the configured text generation client (singleton)."""
    global _client
    if _client is not None:
        return _client

    if not settings.gemini_api_key:
        raise RuntimeError("No text generation client configured. Set SACHET_GEMINI_API_KEY.")

    _client = GeminiClient()
    logger.info("Text generation client initialized: %s (%s)", _client.name(), settings.gemini_model)
    return _client


def reset_text_client() -> None:
    """Reset singleton (for testing or key rotation)."""
    global _client
    _client = None
