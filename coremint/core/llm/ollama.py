"""
Ollama LLM provider using native ollama-python SDK.
"""

import ollama

from coremint.core.llm.base import LLMProvider
from coremint.utils.exceptions import LLMError, ValidationError
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


class OllamaLLM(LLMProvider):
    """
    Ollama LLM provider for text generation.

    Uses native ollama-python SDK for chat completions,
    with format="json" for JSON mode.
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "qwen2.5:7b",
        timeout: float = 120.0,
    ):
        """
        Initialize Ollama LLM provider.

        Args:
            host: Ollama server URL
            model: Model name for text generation
            timeout: Request timeout in seconds
        """
        self.host = host
        self.model = model
        self.timeout = timeout

        self.client = ollama.AsyncClient(host=host, timeout=timeout)

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
        Generate completion using Ollama.

        Args:
            prompt: User message
            system: Optional system instruction
            json_mode: Enforce a JSON response
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional options (passed to Ollama)

        Returns:
            Completion text
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        options = {
            "temperature": temperature,
            "num_predict": max_tokens,
            **kwargs.get("options", {}),
        }

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat(
                model=self.model,
                messages=messages,
                format="json" if json_mode else None,
                options=options,
                **{k: v for k, v in kwargs.items() if k != "options"},
            )
        except Exception as e:
            logger.error(f"Ollama API error: {e}")
            raise LLMError(f"Ollama API error: {e}") from e

        content = response["message"]["content"]
        if not content:
            raise LLMError("Ollama returned empty content", context={"model": self.model})

        return content

    async def close(self):
        """Close client (Ollama SDK handles cleanup internally)."""
        pass
