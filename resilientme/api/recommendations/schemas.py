"""Request and response schemas for coping-strategy recommendations."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from resilientme.api.strategies.schemas import StrategyOut
from resilientme.models.strategy import StrategyCategory
from resilientme.services.presentation_state import RecommendedStrategiesState
from resilientme.services.recommendation_engine import RecommendationResult


class RecommendRequest(BaseModel):
    """Request schema for POST /v1/recommendations."""

    text: Optional[str] = Field(
        default=None,
        max_length=20000,
        description="Journal text to scan for emotion keywords.",
    )
    mood: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Mood label from a check-in (e.g. 'Anxious').",
    )
    intensity: Optional[float] = Field(
        default=None,
        ge=0,
        description="Self-reported strength of the reaction on the 1..intensity_scale scale.",
    )
    intensity_scale: Literal[5, 10] = Field(
        default=10,
        description="Scale the intensity was recorded on.",
    )
    trigger: Optional[str] = Field(
        default=None,
        max_length=200,
        description="What caused the reaction (e.g. 'Job application').",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "I felt so rejected and sad after the interview",
                "mood": "Sad",
                "intensity": 8,
                "intensity_scale": 10,
                "trigger": "Job application",
            }
        }
    }


class RecommendationOut(BaseModel):
    """Recommended strategies plus what they were matched on."""

    strategies: List[StrategyOut]
    categories: List[StrategyCategory]
    strong_reaction: bool

    @classmethod
    def from_result(cls, result: RecommendationResult) -> "RecommendationOut":
        return cls(
            strategies=[StrategyOut.from_record(s) for s in result.strategies],
            categories=[c for c in StrategyCategory if c in result.categories],
            strong_reaction=result.strong_reaction,
        )


class JournalRecommendRequest(BaseModel):
    """Request schema for POST /v1/recommendations/journal."""

    content: str = Field(..., description="Full text of the saved journal entry.")
    mood: Optional[str] = Field(default=None, max_length=50)
    intensity: Optional[float] = Field(default=None, ge=0)
    intensity_scale: Literal[5, 10] = 10


class PresentationOut(BaseModel):
    """A recommendation the client should present once."""

    presentation_id: str
    recommendation: RecommendationOut

    @classmethod
    def from_state(cls, state: RecommendedStrategiesState) -> "PresentationOut":
        return cls(
            presentation_id=str(state.id),
            recommendation=RecommendationOut.from_result(state.result),
        )
