"""
Tests for OpenAI-compatible LLM provider.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from coremint.core.llm.openai import OpenAILLM
from coremint.utils.exceptions import LLMError, ValidationError


def chat_response(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest.fixture
def openai_llm():
    """Create OpenAI LLM for testing."""
    return OpenAILLM(
        api_key="test-key",
        model="deepseek-chat",
        base_url="https://api.deepseek.com",
        timeout=120.0,
    )


@pytest.mark.unit
@pytest.mark.asyncio
class TestOpenAILLM:
    """Test OpenAI-compatible LLM provider."""

    async def test_initialization(self, openai_llm):
        assert openai_llm.model == "deepseek-chat"
        assert openai_llm.client is not None

    async def test_complete_simple(self, openai_llm):
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = chat_response("test response")

            result = await openai_llm.complete("test prompt")

            assert result == "test response"
            messages = mock_create.call_args.kwargs["messages"]
            assert messages == [{"role": "user", "content": "test prompt"}]
            assert "response_format" not in mock_create.call_args.kwargs

    async def test_complete_with_system_and_json_mode(self, openai_llm):
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = chat_response("{}")

            await openai_llm.complete(
                "text", system="be strict", json_mode=True, temperature=1.3, max_tokens=500
            )

            kwargs = mock_create.call_args.kwargs
            assert kwargs["messages"][0] == {"role": "system", "content": "be strict"}
            assert kwargs["messages"][1] == {"role": "user", "content": "text"}
            assert kwargs["response_format"] == {"type": "json_object"}
            assert kwargs["temperature"] == 1.3
            assert kwargs["max_tokens"] == 500
            assert kwargs["model"] == "deepseek-chat"

    async def test_empty_prompt_raises(self, openai_llm):
        with pytest.raises(ValidationError):
            await openai_llm.complete("   ")

    async def test_api_error_wrapped(self, openai_llm):
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = RuntimeError("401 Unauthorized")

            with pytest.raises(LLMError, match="401"):
                await openai_llm.complete("test")

    async def test_empty_content_raises(self, openai_llm):
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = chat_response(None)

            with pytest.raises(LLMError, match="empty content"):
                await openai_llm.complete("test")

    async def test_close(self, openai_llm):
        with patch.object(openai_llm.client, "close", new_callable=AsyncMock) as mock_close:
            await openai_llm.close()
            mock_close.assert_called_once()
