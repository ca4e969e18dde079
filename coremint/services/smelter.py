"""
Smelt service: analyze text, fall back on failure, auto-save on success.
"""

from dataclasses import dataclass

from coremint.constants import (
    DEFAULT_FALLBACK_INSIGHT,
    FALLBACK_CASES,
    FALLBACK_INSIGHTS,
    FALLBACK_KEYWORDS,
    FALLBACK_LOGIC,
    FALLBACK_STEPS,
)
from coremint.models.analysis import AnalysisResult, AppMode
from coremint.models.knowledge import KnowledgeItem
from coremint.services.analysis_provider import AnalysisProvider
from coremint.services.knowledge_library import KnowledgeLibrary
from coremint.utils.exceptions import AnalysisError
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


def fallback_result(mode: AppMode) -> AnalysisResult:
    """Offline demo content shown when the provider fails."""
    return AnalysisResult(
        keywords=FALLBACK_KEYWORDS,
        core_insight=FALLBACK_INSIGHTS.get(mode, DEFAULT_FALLBACK_INSIGHT),
        underlying_logic=list(FALLBACK_LOGIC),
        actionable_steps=list(FALLBACK_STEPS),
        case_studies=list(FALLBACK_CASES),
    )


@dataclass
class SmeltOutcome:
    """Result of one smelt: what to show, and what was saved."""

    result: AnalysisResult
    item: KnowledgeItem | None = None
    fallback: bool = False
    error: str | None = None


class SmeltService:
    """Calling layer between the analysis provider and the library."""

    def __init__(self, provider: AnalysisProvider, library: KnowledgeLibrary):
        self.provider = provider
        self.library = library

    async def smelt(self, text: str, mode: AppMode, memo: str = "") -> SmeltOutcome:
        """
        Analyze text and store the result.

        Provider failures are not propagated: the fallback result is
        returned for display and nothing is written to the library.

        Raises:
            ValidationError: If text is empty
        """
        try:
            result = await self.provider.analyze(text, mode)
        except AnalysisError as e:
            logger.warning(f"Smelting failed, using fallback: {e.message}")
            return SmeltOutcome(result=fallback_result(mode), fallback=True, error=e.message)

        item = await self.library.add_item(result, memo)
        return SmeltOutcome(result=result, item=item)
