"""
Analysis models: persona modes and the structured extraction result.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AppMode(str, Enum):
    """Persona used when smelting text."""

    COACH = "COACH"  # Strict, military-style discipline
    ENCOURAGE = "ENCOURAGE"  # Warm, empathetic support
    TOXIC = "TOXIC"  # Cynical, high-standard critique


class ModeConfig(BaseModel):
    """Display and prompt settings for one persona mode."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: AppMode
    label: str
    color: str
    description: str
    system_instruction: str


class AnalysisResult(BaseModel):
    """
    Structured knowledge extracted from raw text.

    All five fields are required. A payload missing any of them, or
    carrying a non-list where a list of strings is expected, fails
    validation and is treated as a provider failure.

    Serialized with camelCase keys (coreInsight, underlyingLogic, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    keywords: str = Field(..., description="Mind-map root label, intended <= 5 characters")
    core_insight: str = Field(..., description="Single-sentence knowledge anchor")
    underlying_logic: list[str] = Field(..., description="Rationale points (the why)")
    actionable_steps: list[str] = Field(..., description="Action items (the how)")
    case_studies: list[str] = Field(..., description="Real examples or analogies")
