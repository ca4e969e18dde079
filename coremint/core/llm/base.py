"""
Abstract base class for LLM providers.
Handles chat-style text generation with an optional JSON output mode.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """
    Abstract base for LLM text generation providers.

    Responsibilities:
    - Chat completion from a system instruction and a user message
    - JSON output mode (the caller parses and validates the payload)
    """

    @abstractmethod
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
        Generate completion from prompt.

        Args:
            prompt: The user message
            system: Optional system instruction
            json_mode: Ask the provider to emit a single JSON object
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Provider-specific parameters

        Returns:
            Raw completion text

        Raises:
            ValidationError: If the prompt is empty
            LLMError: If the provider call fails or returns nothing
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Close any open connections.
        """
