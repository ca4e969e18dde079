"""
LLM provider abstraction layer for text generation.

Supported providers:
- OpenAI-compatible endpoints (official SDK; DeepSeek by default)
- Ollama (native SDK)
"""

from coremint.core.llm.base import LLMProvider
from coremint.core.llm.ollama import OllamaLLM
from coremint.core.llm.openai import OpenAILLM

__all__ = [
    "LLMProvider",
    "OllamaLLM",
    "OpenAILLM",
]
