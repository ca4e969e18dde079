"""
Analysis provider: turns raw text into a validated AnalysisResult.

The LLM is asked for a strict JSON object in Simplified Chinese. The
reply is stripped of Markdown code fences and validated against the
AnalysisResult schema; anything unusable is an AnalysisError.
"""

import json

from pydantic import ValidationError as PydanticValidationError

from coremint.constants import MODES
from coremint.core.llm.base import LLMProvider
from coremint.models.analysis import AnalysisResult, AppMode
from coremint.utils.exceptions import AnalysisError, LLMError, ValidationError
from coremint.utils.logger import get_logger

logger = get_logger(__name__)

OUTPUT_SHAPE = """{
  "keywords": "思维导图中心关键词（5个字以内）",
  "coreInsight": "核心观点/知识锚点（最重要的单点总结）",
  "underlyingLogic": ["底层逻辑1", "底层逻辑2", "底层逻辑3"],
  "actionableSteps": ["实操步骤1", "实操步骤2", "实操步骤3"],
  "caseStudies": ["真实案例1", "真实案例2"]
}"""


def build_system_instruction(mode: AppMode) -> str:
    """System prompt for one persona mode."""
    return f"""你就是 CoreMint (智核)，一个“第二大脑”知识内化引擎。
{MODES[mode].system_instruction}

你的任务是分析用户输入的文本并提取结构化知识。

【输出格式要求】：
你必须输出一个符合以下结构的严格 JSON 对象（不要包含 markdown 代码块标记，不要用 ```json 包裹）：
{OUTPUT_SHAPE}

【重要约束】：
1. 无论用户输入何种语言，你的输出结果（JSON中的所有值）必须严格使用【简体中文】。
2. 保持深刻、简洁、高智感的表达风格。"""


def strip_code_fences(content: str) -> str:
    """Remove ```json / ``` markers the model may add despite instructions."""
    return content.replace("```json", "").replace("```", "").strip()


def parse_analysis(content: str) -> AnalysisResult:
    """
    Parse and validate a raw model reply.

    Raises:
        AnalysisError: If the reply is not a JSON object of the expected shape
    """
    cleaned = strip_code_fences(content)
    try:
        payload = json.loads(cleaned)
        if not isinstance(payload, dict):
            raise AnalysisError(
                "Analysis payload is not a JSON object",
                context={"payload_type": type(payload).__name__},
            )
        return AnalysisResult.model_validate(payload)
    except json.JSONDecodeError as e:
        raise AnalysisError(
            f"Analysis payload is not valid JSON: {e}", context={"raw": cleaned[:500]}
        ) from e
    except PydanticValidationError as e:
        raise AnalysisError(
            f"Analysis payload has the wrong shape: {e}", context={"raw": cleaned[:500]}
        ) from e


class AnalysisProvider:
    """Knowledge extraction on top of an LLM provider."""

    def __init__(self, llm: LLMProvider | None, temperature: float = 1.3, max_tokens: int = 2000):
        """
        Args:
            llm: LLM provider used for completions; None when unconfigured,
                in which case every analysis fails with AnalysisError
            temperature: Sampling temperature
            max_tokens: Completion budget
        """
        self.llm = llm
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def analyze(self, text: str, mode: AppMode) -> AnalysisResult:
        """
        Extract structured knowledge from text.

        Args:
            text: Raw pasted text
            mode: Persona mode

        Returns:
            Validated analysis result

        Raises:
            ValidationError: If text is empty
            AnalysisError: If the provider fails or returns an unusable payload
        """
        if not text or not text.strip():
            raise ValidationError("Text to analyze cannot be empty")

        if self.llm is None:
            raise AnalysisError("No LLM provider configured (missing API key?)")

        try:
            content = await self.llm.complete(
                text,
                system=build_system_instruction(mode),
                json_mode=True,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except LLMError as e:
            raise AnalysisError(f"Analysis provider failed: {e.message}", context=e.context) from e

        result = parse_analysis(content)
        logger.info(f"Analysis complete: {result.keywords}")
        return result

    async def close(self) -> None:
        if self.llm is not None:
            await self.llm.close()
