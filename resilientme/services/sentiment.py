"""Keyword-based emotion and intensity reading for journal text."""

from __future__ import annotations

from typing import Dict, Optional

from resilientme.models.mood import JournalMood, SentimentReading


# Negative emotions are checked first; they are the ones that warrant a recommendation.
NEGATIVE_EMOTIONS: Dict[str, float] = {
    "rejected": 0.85,
    "overwhelmed": 0.8,
    "angry": 0.8,
    "lonely": 0.75,
    "anxious": 0.75,
    "sad": 0.7,
    "hurt": 0.7,
    "stressed": 0.7,
    "frustrated": 0.65,
    "disappointed": 0.6,
    "worried": 0.6,
}

POSITIVE_EMOTIONS: Dict[str, float] = {
    "excited": 0.9,
    "loved": 0.9,
    "grateful": 0.85,
    "happy": 0.8,
    "confident": 0.8,
    "proud": 0.75,
    "hopeful": 0.7,
    "peaceful": 0.6,
    "calm": 0.5,
}

NEUTRAL_MIN_LENGTH = 30

EMOTION_MOODS: Dict[str, JournalMood] = {
    "sad": JournalMood.SAD,
    "disappointed": JournalMood.SAD,
    "hurt": JournalMood.SAD,
    "lonely": JournalMood.SAD,
    "angry": JournalMood.ANGRY,
    "frustrated": JournalMood.ANGRY,
    "anxious": JournalMood.ANXIOUS,
    "worried": JournalMood.ANXIOUS,
    "stressed": JournalMood.ANXIOUS,
    "overwhelmed": JournalMood.OVERWHELMED,
    "rejected": JournalMood.OVERWHELMED,
    "happy": JournalMood.GREAT,
    "excited": JournalMood.GREAT,
    "proud": JournalMood.GREAT,
    "confident": JournalMood.GREAT,
    "loved": JournalMood.GREAT,
    "grateful": JournalMood.GOOD,
    "peaceful": JournalMood.GOOD,
    "hopeful": JournalMood.GOOD,
    "calm": JournalMood.GOOD,
    "neutral": JournalMood.NEUTRAL,
}


def analyze_sentiment(text: Optional[str]) -> Optional[SentimentReading]:
    """
    Detect the primary emotion in text and its base intensity (0.0-1.0).

    Returns ("neutral", 0.5) for longer text with no emotion keywords and None
    when there is too little to go on.
    """
    if not text:
        return None
    lowered = text.lower()

    for table in (NEGATIVE_EMOTIONS, POSITIVE_EMOTIONS):
        for emotion, intensity in table.items():
            if emotion in lowered:
                return SentimentReading(emotion=emotion, intensity=intensity)

    if len(text) > NEUTRAL_MIN_LENGTH:
        return SentimentReading(emotion="neutral", intensity=0.5)
    return None


def mood_from_sentiment(reading: Optional[SentimentReading]) -> Optional[JournalMood]:
    if reading is None:
        return None
    return EMOTION_MOODS.get(reading.emotion.lower(), JournalMood.NEUTRAL)
