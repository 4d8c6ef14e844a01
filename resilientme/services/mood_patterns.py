"""
Pattern-based coping recommendations from a user's mood history.

The storage layer hands over saved check-ins, newest first; everything here
is a pure function of that list. Two kinds of output:

- PatternRecommendation: a recurring pattern (anxiety after rejection,
  persistent sadness, social rejection sensitivity, professional rejection)
  with a confidence level and the catalog strategies that address it.
- AdaptiveNudge: a short notification-style suggestion for recurring themes
  in check-in notes (self-doubt, loneliness, job rejection).

- Pattern detectors (Section I)
- Adaptive nudges (Section II)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from resilientme.config.logger import app_logger
from resilientme.config.settings import settings
from resilientme.models.mood import MoodCheckIn


# Minimum 1-5 intensity for a check-in to feed the anxiety and sadness patterns
PATTERN_MIN_INTENSITY = 3
SOCIAL_SENSITIVITY_MIN_INTENSITY = 4

SADNESS_WINDOW = 20
SADNESS_MIN_RATIO = 0.35

NUDGE_WINDOW = 30
NUDGE_MIN_FREQUENCY = 3

SOCIAL_TRIGGER_WORDS = ("social", "friend")
SOCIAL_SENSITIVITY_TRIGGER_WORDS = ("social", "friend", "group", "media")
PROFESSIONAL_TRIGGER_WORDS = ("professional", "job", "work", "career")
JOB_NUDGE_TRIGGER_WORDS = ("job", "work", "career", "interview")

SELF_DOUBT_PHRASES = ("doubt", "not good enough", "inadequate", "unworthy", "imposter")
LONELINESS_PHRASES = ("lonely", "alone", "isolated", "disconnected")


@dataclass(frozen=True)
class PatternRecommendation:
    """A recurring mood pattern and the strategies suggested for it."""

    pattern: str
    title: str
    description: str
    trigger_pattern: str
    strategy_ids: Tuple[str, ...]
    confidence: float
    occurrences: int


@dataclass(frozen=True)
class AdaptiveNudge:
    pattern: str
    mood: str
    frequency: int
    title: str
    body: str


def _confidence(value: float) -> float:
    return round(min(1.0, value), 4)


# ════════════════════════════════════════════════════════════════════════════
# SECTION I: PATTERN DETECTORS
# ════════════════════════════════════════════════════════════════════════════

def anxiety_after_rejection(
    entries: Sequence[MoodCheckIn], threshold: int = settings.INSIGHT_THRESHOLD
) -> Optional[PatternRecommendation]:
    matches = [
        e for e in entries
        if e.rejection_related and e.is_mood("anxious") and e.intensity >= PATTERN_MIN_INTENSITY
    ]
    if len(matches) < threshold:
        return None

    strategy_ids: Tuple[str, ...] = ("grounding-5-4-3-2-1", "thought-challenge")
    if any(e.trigger_mentions(*SOCIAL_TRIGGER_WORDS) for e in matches):
        strategy_ids = ("connection-quick-chat",) + strategy_ids

    return PatternRecommendation(
        pattern="anxiety-after-rejection",
        title="Managing Anxiety After Rejection",
        description=(
            "I've noticed a pattern of anxiety after rejection experiences. Here are some evidence-based "
            "strategies that may help you regulate these feelings more effectively."
        ),
        trigger_pattern="Anxiety following rejection experiences",
        strategy_ids=strategy_ids,
        confidence=_confidence(len(matches) / 10.0 + 0.3),
        occurrences=len(matches),
    )


def persistent_sadness(
    entries: Sequence[MoodCheckIn], threshold: int = settings.INSIGHT_THRESHOLD
) -> Optional[PatternRecommendation]:
    """Sadness tied to rejection that makes up at least 35% of the recent window."""
    recent = list(entries[:SADNESS_WINDOW])
    matches = [
        e for e in recent
        if e.rejection_related and e.is_mood("sad") and e.intensity >= PATTERN_MIN_INTENSITY
    ]
    if len(matches) < threshold:
        return None

    ratio = len(matches) / len(recent)
    if ratio < SADNESS_MIN_RATIO:
        return None

    return PatternRecommendation(
        pattern="persistent-sadness",
        title="Navigating Periods of Sadness",
        description=(
            "I've noticed recurring feelings of sadness in your recent entries. Here are some strategies "
            "that research suggests can help lift your mood gradually."
        ),
        trigger_pattern="Persistent feelings of sadness or discouragement",
        strategy_ids=("soothing-ritual", "thought-challenge", "self-compassion-break"),
        confidence=_confidence(ratio + 0.2),
        occurrences=len(matches),
    )


def social_rejection_sensitivity(
    entries: Sequence[MoodCheckIn], threshold: int = settings.INSIGHT_THRESHOLD
) -> Optional[PatternRecommendation]:
    matches = [
        e for e in entries
        if e.rejection_related
        and e.intensity >= SOCIAL_SENSITIVITY_MIN_INTENSITY
        and e.trigger_mentions(*SOCIAL_SENSITIVITY_TRIGGER_WORDS)
    ]
    if len(matches) < threshold:
        return None

    return PatternRecommendation(
        pattern="social-rejection-sensitivity",
        title="Building Social Resilience",
        description=(
            "I've noticed that social rejection experiences particularly affect you. These strategies can "
            "help build resilience against social rejection and strengthen your support network."
        ),
        trigger_pattern="High sensitivity to social rejection experiences",
        strategy_ids=("rejection-reframe", "connection-quick-chat", "assertiveness-training"),
        confidence=_confidence(len(matches) / 8.0 + 0.25),
        occurrences=len(matches),
    )


def professional_rejection(
    entries: Sequence[MoodCheckIn], threshold: int = settings.INSIGHT_THRESHOLD
) -> Optional[PatternRecommendation]:
    matches = [
        e for e in entries
        if e.rejection_related and e.trigger_mentions(*PROFESSIONAL_TRIGGER_WORDS)
    ]
    if len(matches) < threshold:
        return None

    return PatternRecommendation(
        pattern="professional-rejection",
        title="Professional Resilience Development",
        description=(
            "I've noticed that professional rejection experiences impact you significantly. These strategies "
            "can help reframe professional setbacks as growth opportunities."
        ),
        trigger_pattern="Emotional responses to professional rejection",
        strategy_ids=("growth-from-rejection", "growth-mindset-development", "achievements-quick-list"),
        confidence=_confidence(len(matches) / 8.0 + 0.3),
        occurrences=len(matches),
    )


PATTERN_DETECTORS: Tuple[Callable[..., Optional[PatternRecommendation]], ...] = (
    anxiety_after_rejection,
    persistent_sadness,
    social_rejection_sensitivity,
    professional_rejection,
)


def analyze_patterns(
    entries: Sequence[MoodCheckIn], threshold: int = settings.INSIGHT_THRESHOLD
) -> List[PatternRecommendation]:
    """Run every detector over the history (newest first), in a fixed order."""
    found: List[PatternRecommendation] = []
    for detector in PATTERN_DETECTORS:
        recommendation = detector(entries, threshold)
        if recommendation is not None:
            found.append(recommendation)
    app_logger.debug(f"Mood pattern analysis over {len(entries)} check-ins found {[r.pattern for r in found]}")
    return found


# ════════════════════════════════════════════════════════════════════════════
# SECTION II: ADAPTIVE NUDGES
# ════════════════════════════════════════════════════════════════════════════

def adaptive_nudges(
    entries: Sequence[MoodCheckIn],
    threshold: int = settings.INSIGHT_THRESHOLD,
    min_frequency: int = NUDGE_MIN_FREQUENCY,
) -> List[AdaptiveNudge]:
    """
    Short suggestions for themes that keep coming up in the last 30 check-ins.

    Nothing is suggested until the history holds at least `threshold`
    check-ins.
    """
    if len(entries) < threshold:
        return []

    recent = entries[:NUDGE_WINDOW]
    nudges: List[AdaptiveNudge] = []

    self_doubt = sum(1 for e in recent if e.note_mentions(*SELF_DOUBT_PHRASES))
    if self_doubt >= min_frequency:
        nudges.append(AdaptiveNudge(
            pattern="self-doubt",
            mood="anxious",
            frequency=self_doubt,
            title="Feeling unsure of yourself?",
            body="Try a quick 'Self-Compassion Break' or review your 'Achievements Quick-List'.",
        ))

    loneliness = sum(1 for e in recent if e.note_mentions(*LONELINESS_PHRASES))
    if loneliness >= min_frequency:
        nudges.append(AdaptiveNudge(
            pattern="loneliness",
            mood="sad",
            frequency=loneliness,
            title="Feeling disconnected?",
            body="Consider a 'Connection Quick-Chat' or try a 'Soothing Ritual' from your toolbox.",
        ))

    job_rejection = sum(
        1 for e in recent
        if e.rejection_related and e.trigger_mentions(*JOB_NUDGE_TRIGGER_WORDS)
    )
    if job_rejection >= min_frequency:
        nudges.append(AdaptiveNudge(
            pattern="job-rejection",
            mood="discouraged",
            frequency=job_rejection,
            title="Processing job search feedback?",
            body="Review your 'Achievements Quick-List' or try the 'Growth Mindset Development' exercise.",
        ))

    return nudges
