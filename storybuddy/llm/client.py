"""
LLM Client for the text-completion oracle.

This module provides a clean async interface to the configured provider
(Google Gemini by default, Groq as an alternative). It handles:
- API client initialization
- A single request per prompt (no retries, no streaming)
- Wrapping every provider failure into LLMError

Why a separate client class:
1. Encapsulation - Provider details hidden from the request pipeline
2. Testability - Easy to replace with a stub in tests
3. Flexibility - Provider is chosen by configuration
"""
from typing import Optional

import google.generativeai as genai
from groq import AsyncGroq

from storybuddy.core.config import Settings, get_settings
from storybuddy.core.exceptions import LLMError
from storybuddy.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Async client for the configured oracle provider.

    Each call to `generate` sends exactly one prompt and returns the
    raw completion text. Failures are never retried.

    Example:
        >>> client = LLMClient()
        >>> text = await client.generate("Write a short story about a kite")
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the client from settings.

        Provider SDK objects are created lazily on first use so the
        application can start without an API key.

        Args:
            settings: Optional Settings instance. Uses cached settings if not provided.
        """
        self.settings = settings or get_settings()
        self.provider = self.settings.llm_provider

        self._gemini_model: Optional[genai.GenerativeModel] = None
        self._groq_client: Optional[AsyncGroq] = None

        logger.info(f"LLM client initialized (provider={self.provider}, model={self.model_name})")

    @property
    def model_name(self) -> str:
        if self.provider == "groq":
            return self.settings.groq_model
        return self.settings.llm_model

    async def generate(self, prompt: str) -> str:
        """
        Send a single prompt and await the completion text.

        Args:
            prompt: Full instruction string

        Returns:
            Raw completion text from the oracle

        Raises:
            LLMError: If the provider call fails or returns no text
        """
        logger.debug(f"Oracle request: provider={self.provider}, prompt_length={len(prompt)}")

        try:
            if self.provider == "groq":
                text = await self._generate_groq(prompt)
            else:
                text = await self._generate_google(prompt)
        except LLMError:
            raise
        except Exception as e:
            logger.error(f"Provider failed ({self.provider}/{self.model_name}): {e}")
            raise LLMError(str(e) or type(e).__name__) from e

        if not text:
            raise LLMError("Model returned an empty response")

        logger.debug(f"Oracle response: length={len(text)}")
        return text

    async def _generate_google(self, prompt: str) -> str:
        """Execute request using Google Gemini."""
        if self._gemini_model is None:
            if not self.settings.gemini_api_key:
                raise LLMError("GEMINI_API_KEY is not configured")

            genai.configure(api_key=self.settings.gemini_api_key)

            generation_config = genai.types.GenerationConfig(
                temperature=self.settings.llm_temperature,
                max_output_tokens=self.settings.llm_max_tokens,
            )
            self._gemini_model = genai.GenerativeModel(
                model_name=self.settings.llm_model,
                generation_config=generation_config,
            )

        response = await self._gemini_model.generate_content_async(prompt)

        # .text raises ValueError when the candidate was blocked
        try:
            return response.text
        except ValueError as e:
            feedback = getattr(response, "prompt_feedback", None)
            raise LLMError(f"Content blocked by Google Safety filters: {feedback or e}") from e

    async def _generate_groq(self, prompt: str) -> str:
        """Execute request using Groq."""
        if self._groq_client is None:
            if not self.settings.groq_api_key:
                raise LLMError("GROQ_API_KEY is not configured")
            self._groq_client = AsyncGroq(api_key=self.settings.groq_api_key, max_retries=0)

        kwargs = {}
        if self.settings.llm_temperature is not None:
            kwargs["temperature"] = self.settings.llm_temperature

        response = await self._groq_client.chat.completions.create(
            model=self.settings.groq_model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self.settings.llm_max_tokens,
            **kwargs,
        )
        return response.choices[0].message.content or ""


# Singleton instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """
    Get or create the global LLMClient instance.

    Returns:
        The singleton LLMClient
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client


def reset_llm_client() -> None:
    """Reset the global LLMClient (useful for testing)."""
    global _llm_client
    _llm_client = None
