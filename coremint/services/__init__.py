"""
Services for CoreMint.

- KnowledgeLibrary: tag assignment and library mutators
- search: weighted relevance search
- export: Markdown export
- LibraryView: browsing/search/export state machine
- AnalysisProvider: LLM-backed knowledge extraction
- SmeltService: analysis with fallback and auto-save
"""

from coremint.services.analysis_provider import AnalysisProvider
from coremint.services.export import export_markdown, render_markdown
from coremint.services.knowledge_library import KnowledgeLibrary, derive_unique_tag
from coremint.services.library_view import LibraryView, ViewMode
from coremint.services.search import search
from coremint.services.smelter import SmeltOutcome, SmeltService, fallback_result

__all__ = [
    "KnowledgeLibrary",
    "derive_unique_tag",
    "search",
    "render_markdown",
    "export_markdown",
    "LibraryView",
    "ViewMode",
    "AnalysisProvider",
    "SmeltService",
    "SmeltOutcome",
    "fallback_result",
]
