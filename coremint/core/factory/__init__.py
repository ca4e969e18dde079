"""
Factory modules for creating CoreMint components.
"""

from coremint.core.factory.llm_factory import LLMFactory
from coremint.core.factory.store_factory import RecordStoreFactory

__all__ = [
    "LLMFactory",
    "RecordStoreFactory",
]
