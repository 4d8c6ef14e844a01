"""Canonical coping-strategy types shared by the catalog, matcher and selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class StrategyCategory(str, Enum):
    """The six emotional-response domains every strategy belongs to."""

    MINDFULNESS = "mindfulness"
    COGNITIVE = "cognitive"
    PHYSICAL = "physical"
    SOCIAL = "social"
    CREATIVE = "creative"
    SELF_CARE = "selfCare"


class StrategyIntensity(str, Enum):
    """Effort tier of a strategy, ordered quick < moderate < intensive."""

    QUICK = "quick"
    MODERATE = "moderate"
    INTENSIVE = "intensive"

    @property
    def rank(self) -> int:
        return _INTENSITY_ORDER.index(self)

    @property
    def time_estimate(self) -> str:
        return _INTENSITY_TIME_ESTIMATES[self]

    # str defines all four comparisons, so each one is overridden here
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StrategyIntensity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StrategyIntensity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StrategyIntensity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StrategyIntensity):
            return NotImplemented
        return self.rank >= other.rank


_INTENSITY_ORDER = (StrategyIntensity.QUICK, StrategyIntensity.MODERATE, StrategyIntensity.INTENSIVE)

_INTENSITY_TIME_ESTIMATES = {
    StrategyIntensity.QUICK: "2-5 minutes",
    StrategyIntensity.MODERATE: "10-15 minutes",
    StrategyIntensity.INTENSIVE: "30+ minutes",
}


class StrategyDuration(str, Enum):
    """Duration bucket parsed from a human-readable time estimate."""

    VERY_SHORT = "veryShort"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def label(self) -> str:
        return _DURATION_LABELS[self]

    @property
    def tier(self) -> StrategyIntensity:
        """Effort tier this duration bucket falls into."""
        return _DURATION_TIERS[self]


_DURATION_LABELS = {
    StrategyDuration.VERY_SHORT: "Under 2 minutes",
    StrategyDuration.SHORT: "2-5 minutes",
    StrategyDuration.MEDIUM: "5-15 minutes",
    StrategyDuration.LONG: "Over 15 minutes",
}

_DURATION_TIERS = {
    StrategyDuration.VERY_SHORT: StrategyIntensity.QUICK,
    StrategyDuration.SHORT: StrategyIntensity.QUICK,
    StrategyDuration.MEDIUM: StrategyIntensity.MODERATE,
    StrategyDuration.LONG: StrategyIntensity.INTENSIVE,
}


def parse_duration(time_to_complete: str) -> StrategyDuration:
    """
    Bucket a free-text time estimate such as "3-5 minutes" or "30+ minutes".

    Unrecognised strings ("Varies") fall back to MEDIUM.
    """
    lowered = time_to_complete.lower()
    if "under 2" in lowered or "1-2" in lowered:
        return StrategyDuration.VERY_SHORT
    if "3-5" in lowered or "2-5" in lowered:
        return StrategyDuration.SHORT
    if "5-15" in lowered or "10-15" in lowered or "5-10" in lowered:
        return StrategyDuration.MEDIUM
    if "15+" in lowered or "30+" in lowered or "15-20" in lowered or "over 15" in lowered or "long" in lowered:
        return StrategyDuration.LONG
    return StrategyDuration.MEDIUM


@dataclass(frozen=True, eq=False)
class StrategyRecord:
    """A single coping strategy from the catalog. Identity is the `id` slug."""

    id: str
    title: str
    description: str
    category: StrategyCategory
    intensity: StrategyIntensity
    time_to_complete: str
    steps: Tuple[str, ...]
    tips: Tuple[str, ...] = ()
    resources: Tuple[str, ...] = ()
    mood_targets: Tuple[str, ...] = ()

    @property
    def duration(self) -> StrategyDuration:
        return parse_duration(self.time_to_complete)

    def targets_mood(self, mood: str) -> bool:
        """True when the strategy lists the mood (case-insensitive) or targets any mood."""
        lowered = mood.strip().lower()
        if not lowered:
            return False
        return any(
            target.lower() == "any" or lowered in target.lower()
            for target in self.mood_targets
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategyRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
