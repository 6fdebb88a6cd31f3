"""Unit tests for storybuddy.llm.client (no network calls are made)."""

from dataclasses import replace
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from storybuddy.core.config import get_settings
from storybuddy.core.exceptions import LLMError
from storybuddy.llm.client import LLMClient, get_llm_client, reset_llm_client


@pytest.fixture
def gemini_settings():
    return replace(get_settings(), llm_provider="gemini", gemini_api_key="key")


@pytest.fixture
def groq_settings():
    return replace(get_settings(), llm_provider="groq", groq_api_key="key")


class TestGemini:

    async def test_returns_text(self, gemini_settings):
        client = LLMClient(gemini_settings)
        client._gemini_model = MagicMock()
        client._gemini_model.generate_content_async = AsyncMock(
            return_value=SimpleNamespace(text="Once upon a time")
        )

        assert await client.generate("prompt") == "Once upon a time"
        client._gemini_model.generate_content_async.assert_awaited_once_with("prompt")

    async def test_provider_error_is_wrapped_once(self, gemini_settings):
        client = LLMClient(gemini_settings)
        client._gemini_model = MagicMock()
        client._gemini_model.generate_content_async = AsyncMock(
            side_effect=RuntimeError("API key not valid")
        )

        with pytest.raises(LLMError, match="API key not valid"):
            await client.generate("prompt")

        assert client._gemini_model.generate_content_async.await_count == 1

    async def test_missing_key(self, gemini_settings):
        client = LLMClient(replace(gemini_settings, gemini_api_key=""))

        with pytest.raises(LLMError, match="GEMINI_API_KEY"):
            await client.generate("prompt")

    async def test_empty_response(self, gemini_settings):
        client = LLMClient(gemini_settings)
        client._gemini_model = MagicMock()
        client._gemini_model.generate_content_async = AsyncMock(return_value=SimpleNamespace(text=""))

        with pytest.raises(LLMError, match="empty response"):
            await client.generate("prompt")

    async def test_model_is_configured_lazily(self, gemini_settings):
        with patch("storybuddy.llm.client.genai") as mock_genai:
            model = mock_genai.GenerativeModel.return_value
            model.generate_content_async = AsyncMock(return_value=SimpleNamespace(text="ok"))

            client = LLMClient(gemini_settings)
            mock_genai.configure.assert_not_called()

            assert await client.generate("prompt") == "ok"
            mock_genai.configure.assert_called_once_with(api_key="key")
            assert mock_genai.GenerativeModel.call_args.kwargs["model_name"] == gemini_settings.llm_model


class TestGroq:

    async def test_returns_message_content(self, groq_settings):
        client = LLMClient(groq_settings)
        completion = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="Namaste"))]
        )
        client._groq_client = MagicMock()
        client._groq_client.chat.completions.create = AsyncMock(return_value=completion)

        assert await client.generate("prompt") == "Namaste"

        kwargs = client._groq_client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == groq_settings.groq_model
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    async def test_missing_key(self, groq_settings):
        client = LLMClient(replace(groq_settings, groq_api_key=""))

        with pytest.raises(LLMError, match="GROQ_API_KEY"):
            await client.generate("prompt")

    def test_model_name_follows_provider(self, groq_settings):
        assert LLMClient(groq_settings).model_name == groq_settings.groq_model


def test_singleton_reset():
    reset_llm_client()
    first = get_llm_client()
    assert get_llm_client() is first
    reset_llm_client()
    assert get_llm_client() is not first
    reset_llm_client()
