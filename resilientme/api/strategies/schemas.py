"""Request and response schemas for the strategy catalog and ratings endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from resilientme.models.strategy import StrategyCategory, StrategyIntensity, StrategyRecord
from resilientme.services.category_mapping import display_name, icon_token


class StrategyOut(BaseModel):
    """Single coping strategy from the catalog."""

    id: str = Field(..., description="Stable strategy identifier (slug).")
    title: str
    description: str
    category: StrategyCategory
    category_display_name: str
    intensity: StrategyIntensity
    duration: str = Field(..., description="Duration bucket parsed from time_to_complete.")
    duration_label: str
    time_to_complete: str
    steps: List[str]
    tips: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    mood_targets: List[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: StrategyRecord) -> "StrategyOut":
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            category=record.category,
            category_display_name=display_name(record.category),
            intensity=record.intensity,
            duration=record.duration.value,
            duration_label=record.duration.label,
            time_to_complete=record.time_to_complete,
            steps=list(record.steps),
            tips=list(record.tips),
            resources=list(record.resources),
            mood_targets=list(record.mood_targets),
        )


class CategoryOut(BaseModel):
    """Canonical category with its display metadata."""

    category: StrategyCategory
    display_name: str
    icon: str
    strategy_count: int = 0

    @classmethod
    def from_category(cls, category: StrategyCategory, strategy_count: int = 0) -> "CategoryOut":
        return cls(
            category=category,
            display_name=display_name(category),
            icon=icon_token(category),
            strategy_count=strategy_count,
        )


class RatingRequest(BaseModel):
    """Request schema for POST /v1/strategies/{strategy_id}/ratings."""

    rating: int = Field(..., ge=1, le=5, description="How helpful the strategy was (1-5).")
    mood_before: Optional[str] = Field(default=None, max_length=50)
    mood_after: Optional[str] = Field(default=None, max_length=50)
    mood_impact: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = Field(default=None, max_length=2000)
    completion_time: Optional[float] = Field(default=None, ge=0, description="Seconds spent on the strategy.")

    model_config = {
        "json_schema_extra": {
            "example": {
                "rating": 4,
                "mood_before": "Anxious",
                "mood_after": "Calm",
                "notes": "Box breathing helped before the call.",
                "completion_time": 240,
            }
        }
    }


class RatingOut(BaseModel):
    id: str
    strategy: str
    rating: int
    timestamp: datetime
    average_rating: float
    completion_count: int


class StrategyScore(BaseModel):
    strategy: str
    value: float


class EffectivenessOut(BaseModel):
    """Aggregate view over recorded ratings."""

    most_effective: List[StrategyScore] = Field(default_factory=list)
    most_used: List[StrategyScore] = Field(default_factory=list)


class StrategyTrendOut(BaseModel):
    strategy: str
    ratings: List[float] = Field(..., description="Latest ratings, oldest first, zero-padded to a fixed length.")
    average_rating: float
