"""
Tests for the analysis provider.
"""

import json
from unittest.mock import AsyncMock

import pytest

from coremint.constants import MODES
from coremint.core.llm.base import LLMProvider
from coremint.models import AnalysisResult, AppMode
from coremint.services.analysis_provider import (
    AnalysisProvider,
    build_system_instruction,
    parse_analysis,
    strip_code_fences,
)
from coremint.utils.exceptions import AnalysisError, LLMError, ValidationError

PAYLOAD = {
    "keywords": "拖延症",
    "coreInsight": "拖延的本质是恐惧",
    "underlyingLogic": ["恐惧机制"],
    "actionableSteps": ["立刻做5分钟"],
    "caseStudies": ["海明威法则"],
}


@pytest.fixture
def mock_llm():
    llm = AsyncMock(spec=LLMProvider)
    llm.complete.return_value = json.dumps(PAYLOAD, ensure_ascii=False)
    return llm


@pytest.fixture
def provider(mock_llm):
    return AnalysisProvider(mock_llm, temperature=1.3, max_tokens=2000)


class TestPromptAndParsing:
    """Tests for prompt building and payload parsing."""

    @pytest.mark.parametrize("mode", list(AppMode))
    def test_system_instruction_includes_mode(self, mode):
        instruction = build_system_instruction(mode)

        assert MODES[mode].system_instruction in instruction
        assert '"coreInsight"' in instruction
        assert "简体中文" in instruction

    def test_strip_code_fences(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert strip_code_fences('```\n{"a": 1}\n```  ') == '{"a": 1}'

    def test_parse_valid_payload(self):
        result = parse_analysis(json.dumps(PAYLOAD))

        assert isinstance(result, AnalysisResult)
        assert result.core_insight == "拖延的本质是恐惧"

    def test_parse_fenced_payload(self):
        result = parse_analysis(f"```json\n{json.dumps(PAYLOAD)}\n```")

        assert result.keywords == "拖延症"

    def test_parse_invalid_json(self):
        with pytest.raises(AnalysisError, match="not valid JSON"):
            parse_analysis("I refuse to answer")

    def test_parse_missing_field(self):
        payload = {k: v for k, v in PAYLOAD.items() if k != "caseStudies"}

        with pytest.raises(AnalysisError, match="wrong shape"):
            parse_analysis(json.dumps(payload))

    def test_parse_non_object(self):
        with pytest.raises(AnalysisError, match="not a JSON object"):
            parse_analysis("[1, 2, 3]")


@pytest.mark.unit
@pytest.mark.asyncio
class TestAnalysisProvider:
    """Tests for AnalysisProvider.analyze."""

    async def test_analyze_success(self, provider, mock_llm):
        result = await provider.analyze("some text", AppMode.COACH)

        assert result.keywords == "拖延症"
        kwargs = mock_llm.complete.call_args.kwargs
        assert mock_llm.complete.call_args.args[0] == "some text"
        assert kwargs["json_mode"] is True
        assert kwargs["system"] == build_system_instruction(AppMode.COACH)
        assert kwargs["temperature"] == 1.3
        assert kwargs["max_tokens"] == 2000

    async def test_empty_text_rejected(self, provider, mock_llm):
        with pytest.raises(ValidationError):
            await provider.analyze("  ", AppMode.TOXIC)
        mock_llm.complete.assert_not_called()

    async def test_llm_failure_becomes_analysis_error(self, provider, mock_llm):
        mock_llm.complete.side_effect = LLMError("OpenAI API error: 401")

        with pytest.raises(AnalysisError, match="401"):
            await provider.analyze("text", AppMode.TOXIC)

    async def test_malformed_payload_becomes_analysis_error(self, provider, mock_llm):
        mock_llm.complete.return_value = '{"keywords": "x"}'

        with pytest.raises(AnalysisError):
            await provider.analyze("text", AppMode.TOXIC)

    async def test_close_closes_llm(self, provider, mock_llm):
        await provider.close()

        mock_llm.close.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unconfigured_provider_fails_analysis():
    provider = AnalysisProvider(None)

    with pytest.raises(AnalysisError, match="No LLM provider"):
        await provider.analyze("text", AppMode.TOXIC)
    await provider.close()
