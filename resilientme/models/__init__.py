"""Models module - canonical domain types for the coping core."""

from resilientme.models.mood import JournalMood, MoodCheckIn, SentimentReading
from resilientme.models.strategy import (
    StrategyCategory,
    StrategyDuration,
    StrategyIntensity,
    StrategyRecord,
    parse_duration,
)

__all__ = [
    "JournalMood",
    "MoodCheckIn",
    "SentimentReading",
    "StrategyCategory",
    "StrategyDuration",
    "StrategyIntensity",
    "StrategyRecord",
    "parse_duration",
]
