"""Request and response schemas for mood-history insights and journal prompts."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from resilientme.api.strategies.schemas import StrategyOut
from resilientme.models.mood import MoodCheckIn
from resilientme.services.mood_patterns import AdaptiveNudge, PatternRecommendation
from resilientme.services.strategy_catalog import StrategyCatalog


class CheckInIn(BaseModel):
    """One saved mood check-in."""

    mood: str = Field(..., max_length=50)
    intensity: int = Field(..., ge=1, le=5)
    note: Optional[str] = Field(default=None, max_length=5000)
    rejection_related: bool = False
    rejection_trigger: Optional[str] = Field(default=None, max_length=200)
    timestamp: Optional[datetime] = None

    def to_check_in(self) -> MoodCheckIn:
        extra = {"timestamp": self.timestamp} if self.timestamp else {}
        return MoodCheckIn(
            mood=self.mood,
            intensity=self.intensity,
            note=self.note,
            rejection_related=self.rejection_related,
            rejection_trigger=self.rejection_trigger,
            **extra,
        )


class PatternAnalysisRequest(BaseModel):
    """Request schema for POST /v1/insights/patterns."""

    check_ins: List[CheckInIn] = Field(
        default_factory=list,
        max_length=500,
        description="Mood history, newest first.",
    )
    threshold: Optional[int] = Field(
        default=None,
        ge=1,
        description="Matching check-ins needed before a pattern is reported.",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "check_ins": [
                    {"mood": "Anxious", "intensity": 4, "rejection_related": True, "rejection_trigger": "Friend ignored me"},
                    {"mood": "Anxious", "intensity": 3, "rejection_related": True, "rejection_trigger": "Job application rejected"},
                    {"mood": "Anxious", "intensity": 5, "rejection_related": True},
                ]
            }
        }
    }


class PatternOut(BaseModel):
    pattern: str
    title: str
    description: str
    trigger_pattern: str
    confidence: float
    occurrences: int
    strategies: List[StrategyOut]

    @classmethod
    def from_pattern(cls, pattern: PatternRecommendation, catalog: StrategyCatalog) -> "PatternOut":
        records = [catalog.get(strategy_id) for strategy_id in pattern.strategy_ids]
        return cls(
            pattern=pattern.pattern,
            title=pattern.title,
            description=pattern.description,
            trigger_pattern=pattern.trigger_pattern,
            confidence=pattern.confidence,
            occurrences=pattern.occurrences,
            strategies=[StrategyOut.from_record(r) for r in records if r is not None],
        )


class NudgeOut(BaseModel):
    pattern: str
    mood: str
    frequency: int
    title: str
    body: str

    @classmethod
    def from_nudge(cls, nudge: AdaptiveNudge) -> "NudgeOut":
        return cls(
            pattern=nudge.pattern,
            mood=nudge.mood,
            frequency=nudge.frequency,
            title=nudge.title,
            body=nudge.body,
        )


class PatternAnalysisOut(BaseModel):
    patterns: List[PatternOut] = Field(default_factory=list)
    nudges: List[NudgeOut] = Field(default_factory=list)


class JournalPromptOut(BaseModel):
    prompt: str
    mood: Optional[str] = None
    trigger_group: Optional[str] = None
