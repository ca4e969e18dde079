"""Utility modules for CoreMint."""

from coremint.utils.exceptions import (
    AnalysisError,
    ConfigurationError,
    CoreMintError,
    LibraryClosedError,
    LLMError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from coremint.utils.id_generator import generate_item_id
from coremint.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_item_id",
    # Exceptions
    "CoreMintError",
    "StoreError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "LLMError",
    "AnalysisError",
    "LibraryClosedError",
]
