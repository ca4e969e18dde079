"""
OpenAI-compatible LLM provider using the official SDK.

Works against any endpoint speaking the Chat Completions protocol,
including DeepSeek (base_url https://api.deepseek.com).
"""

from openai import AsyncOpenAI

from coremint.core.llm.base import LLMProvider
from coremint.utils.exceptions import LLMError, ValidationError
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(LLMProvider):
    """
    OpenAI-compatible LLM provider for text generation.

    JSON mode maps to response_format={"type": "json_object"}.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize OpenAI-compatible LLM provider.

        Args:
            api_key: API key
            model: Model name (e.g., "deepseek-chat", "gpt-4o-mini")
            organization: Optional organization ID
            base_url: Optional custom base URL
            timeout: Request timeout in seconds
        """
        self.model = model

        self.client = AsyncOpenAI(
            api_key=api_key, organization=organization, base_url=base_url, timeout=timeout
        )

    async def complete(
        self,
        prompt: str,
        system: str | None = None,
        json_mode: bool = False,
        max_tokens: int = 2000,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using the Chat Completions API.

        Args:
            prompt: User message
            system: Optional system instruction
            json_mode: Enforce a JSON object response
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop, presence_penalty)
        Returns:
            Completion text
        Raises:
            LLMError: If the API call fails or returns empty content
            ValidationError: If the prompt is empty
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        params = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
            **kwargs,
        }
        if json_mode:
            params["response_format"] = {"type": "json_object"}

        try:
            response = await self.client.chat.completions.create(**params)
            content = response.choices[0].message.content if response.choices else None
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise LLMError(f"OpenAI API error: {e}") from e

        if not content:
            raise LLMError("OpenAI returned empty content", context={"model": self.model})

        return content

    async def close(self):
        """Close OpenAI client."""
        await self.client.close()
