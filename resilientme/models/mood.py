"""Mood types recorded alongside journal entries and check-ins."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class JournalMood(str, Enum):
    GREAT = "Great"
    GOOD = "Good"
    NEUTRAL = "Neutral"
    SAD = "Sad"
    ANXIOUS = "Anxious"
    ANGRY = "Angry"
    OVERWHELMED = "Overwhelmed"


@dataclass(frozen=True)
class SentimentReading:
    """Primary emotion detected in a piece of text and its strength (0.0-1.0)."""

    emotion: str
    intensity: float


@dataclass(frozen=True)
class MoodCheckIn:
    """
    A saved mood check-in as handed over by the storage layer.

    Intensity is on the check-in's 1-5 scale. The rejection fields are set
    when the user tied the mood to a rejection experience.
    """

    mood: str
    intensity: int
    note: Optional[str] = None
    rejection_related: bool = False
    rejection_trigger: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_mood(self, mood: str) -> bool:
        return self.mood.strip().lower() == mood.strip().lower()

    def trigger_mentions(self, *words: str) -> bool:
        """True when the rejection trigger contains any of the words (case-insensitive)."""
        trigger = (self.rejection_trigger or "").lower()
        return bool(trigger) and any(word in trigger for word in words)

    def note_mentions(self, *phrases: str) -> bool:
        note = (self.note or "").lower()
        return bool(note) and any(phrase in note for phrase in phrases)
