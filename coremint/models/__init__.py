"""
Data models for CoreMint.

- AppMode, ModeConfig: persona modes for smelting
- AnalysisResult: structured extraction result from the LLM
- KnowledgeItem, LibraryStorage: persisted library entities
"""

from coremint.models.analysis import AnalysisResult, AppMode, ModeConfig
from coremint.models.knowledge import (
    DATE_FORMAT,
    MAX_TAGS,
    KnowledgeItem,
    LibraryStorage,
    dump_library,
    format_timestamp,
    parse_library,
)

__all__ = [
    # Analysis models
    "AppMode",
    "ModeConfig",
    "AnalysisResult",
    # Library models
    "KnowledgeItem",
    "LibraryStorage",
    "MAX_TAGS",
    "DATE_FORMAT",
    "format_timestamp",
    "dump_library",
    "parse_library",
]
