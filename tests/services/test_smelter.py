"""
Tests for the smelt service.
"""

from unittest.mock import AsyncMock

import pytest

from conftest import make_result
from coremint.constants import DEFAULT_FALLBACK_INSIGHT, FALLBACK_INSIGHTS, FALLBACK_KEYWORDS
from coremint.models import AppMode
from coremint.services.analysis_provider import AnalysisProvider
from coremint.services.smelter import SmeltService, fallback_result
from coremint.utils.exceptions import AnalysisError, ValidationError


@pytest.fixture
def mock_provider():
    provider = AsyncMock(spec=AnalysisProvider)
    provider.analyze.return_value = make_result("复利")
    return provider


@pytest.fixture
def smelter(mock_provider, library):
    return SmeltService(mock_provider, library)


class TestFallbackResult:
    """Tests for fallback content."""

    def test_toxic_fallback_has_own_insight(self):
        result = fallback_result(AppMode.TOXIC)

        assert result.keywords == FALLBACK_KEYWORDS
        assert result.core_insight == FALLBACK_INSIGHTS[AppMode.TOXIC]

    @pytest.mark.parametrize("mode", [AppMode.COACH, AppMode.ENCOURAGE])
    def test_other_modes_share_insight(self, mode):
        assert fallback_result(mode).core_insight == DEFAULT_FALLBACK_INSIGHT

    def test_fallback_is_complete(self):
        result = fallback_result(AppMode.COACH)

        assert result.underlying_logic
        assert result.actionable_steps
        assert result.case_studies


@pytest.mark.unit
@pytest.mark.asyncio
class TestSmeltService:
    """Tests for SmeltService.smelt."""

    async def test_success_saves_item_with_memo(self, smelter, library, mock_provider):
        outcome = await smelter.smelt("text", AppMode.COACH, memo="记住")

        assert not outcome.fallback
        assert outcome.error is None
        assert outcome.item is not None
        assert outcome.item.tags == ("复利",)
        assert outcome.item.personal_memo == "记住"
        assert await library.load() == [outcome.item]
        mock_provider.analyze.assert_awaited_once_with("text", AppMode.COACH)

    async def test_failure_returns_fallback_without_saving(self, smelter, library, mock_provider):
        mock_provider.analyze.side_effect = AnalysisError("Analysis provider failed: {boom}")

        outcome = await smelter.smelt("text", AppMode.TOXIC)

        assert outcome.fallback
        assert outcome.item is None
        assert outcome.result == fallback_result(AppMode.TOXIC)
        assert "boom" in outcome.error
        assert await library.load() == []

    async def test_empty_text_propagates(self, smelter, mock_provider):
        mock_provider.analyze.side_effect = ValidationError("Text to analyze cannot be empty")

        with pytest.raises(ValidationError):
            await smelter.smelt("", AppMode.TOXIC)

    async def test_repeated_smelts_get_unique_tags(self, smelter):
        tags = [(await smelter.smelt("text", AppMode.TOXIC)).item.primary_tag for _ in range(3)]

        assert tags == ["复利", "复利(1)", "复利(2)"]
