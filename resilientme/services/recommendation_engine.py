"""
Coping-strategy recommendation selection.

Turns a set of matched categories (plus optional mood, intensity and trigger)
into a short, deduplicated list of strategies:

1. Visit matched categories in canonical order, ranking each category's
   strategies by tier preference and mood fit, and take the top few.
2. Pull in strategies whose description mentions the named trigger.
3. Drop duplicates, shuffle with the injected random source, cap the list.

Selection never raises for missing data; it just returns fewer strategies.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

from resilientme.config.settings import settings
from resilientme.models.strategy import StrategyCategory, StrategyIntensity, StrategyRecord
from resilientme.services.strategy_catalog import StrategyCatalog


TRIGGER_WORD_MIN_LENGTH = 3


@dataclass(frozen=True)
class RecommendationRequest:
    """Inputs for one recommendation. Intensity is read on a 1..intensity_scale scale."""

    text: Optional[str] = None
    mood: Optional[str] = None
    intensity: Optional[float] = None
    intensity_scale: int = 10
    trigger: Optional[str] = None

    @property
    def has_context(self) -> bool:
        """True when there is text or a mood to match against."""
        return bool((self.text or "").strip() or (self.mood or "").strip())

    @property
    def match_text(self) -> str:
        """Text the keyword matcher sees: journal text followed by the mood label."""
        return " ".join(part for part in (self.text, self.mood) if part)


@dataclass(frozen=True)
class RecommendationResult:
    """Ordered, bounded list of recommended strategies. Empty means "nothing to show"."""

    strategies: Tuple[StrategyRecord, ...] = ()
    categories: FrozenSet[StrategyCategory] = field(default_factory=frozenset)
    strong_reaction: bool = False

    @classmethod
    def empty(cls) -> "RecommendationResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.strategies

    @property
    def strategy_ids(self) -> List[str]:
        return [s.id for s in self.strategies]

    def __len__(self) -> int:
        return len(self.strategies)

    def __iter__(self) -> Iterator[StrategyRecord]:
        return iter(self.strategies)


def normalize_intensity(value: Optional[float], scale: int = 10) -> Optional[float]:
    """
    Express a 1..scale intensity as a 0.0-1.0 fraction, clamped.

    A scale of 1 means the value is already a fraction.
    """
    if value is None:
        return None
    if scale <= 1:
        fraction = float(value)
    else:
        fraction = (float(value) - 1.0) / (scale - 1.0)
    return min(1.0, max(0.0, fraction))


def dedupe_strategies(strategies: Iterable[StrategyRecord]) -> List[StrategyRecord]:
    """Drop repeated strategy ids, keeping the first occurrence."""
    seen = set()
    unique: List[StrategyRecord] = []
    for strategy in strategies:
        if strategy.id in seen:
            continue
        seen.add(strategy.id)
        unique.append(strategy)
    return unique


class RecommendationSelector:
    """Pick a bounded set of strategies from the catalog for matched categories."""

    def __init__(
        self,
        catalog: StrategyCatalog,
        rng: Optional[random.Random] = None,
        max_results: int = settings.RECOMMENDATION_MAX_RESULTS,
        per_category: int = settings.RECOMMENDATION_PER_CATEGORY,
        trigger_limit: int = settings.RECOMMENDATION_TRIGGER_LIMIT,
        strong_threshold: float = settings.STRONG_REACTION_THRESHOLD,
        shuffle: bool = settings.RECOMMENDATION_SHUFFLE,
    ):
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()
        self.max_results = max_results
        self.per_category = per_category
        self.trigger_limit = trigger_limit
        self.strong_threshold = strong_threshold
        self.shuffle = shuffle

    def is_strong_reaction(self, intensity: Optional[float], intensity_scale: int = 10) -> bool:
        fraction = normalize_intensity(intensity, intensity_scale)
        return fraction is not None and fraction >= self.strong_threshold

    def select(
        self,
        categories: Iterable[StrategyCategory],
        mood: Optional[str] = None,
        intensity: Optional[float] = None,
        intensity_scale: int = 10,
        trigger: Optional[str] = None,
    ) -> RecommendationResult:
        matched = frozenset(categories)
        strong = self.is_strong_reaction(intensity, intensity_scale)

        picks: List[StrategyRecord] = []
        for category in StrategyCategory:
            if category not in matched:
                continue
            ranked = self._rank(self.catalog.strategies_for_category(category), mood, strong)
            picks.extend(ranked[: self.per_category])

        if trigger and trigger.strip():
            picked_ids = {s.id for s in picks}
            related = [s for s in self._trigger_matches(trigger) if s.id not in picked_ids]
            picks.extend(related[: self.trigger_limit])

        unique = dedupe_strategies(picks)
        if self.shuffle:
            self.rng.shuffle(unique)

        return RecommendationResult(
            strategies=tuple(unique[: self.max_results]),
            categories=matched,
            strong_reaction=strong,
        )

    def select_for(self, request: RecommendationRequest, categories: Iterable[StrategyCategory]) -> RecommendationResult:
        return self.select(
            categories,
            mood=request.mood,
            intensity=request.intensity,
            intensity_scale=request.intensity_scale,
            trigger=request.trigger,
        )

    def _rank(self, candidates: List[StrategyRecord], mood: Optional[str], strong: bool) -> List[StrategyRecord]:
        """
        Order one category's strategies.

        Strong reactions put intensive strategies first; otherwise quick and
        moderate ones lead. Within a tier, strategies targeting the mood lead.
        """
        def sort_key(strategy: StrategyRecord) -> Tuple[int, int]:
            is_intensive = strategy.intensity == StrategyIntensity.INTENSIVE
            tier_key = 0 if is_intensive == strong else 1
            mood_key = 0 if mood and strategy.targets_mood(mood) else 1
            return tier_key, mood_key

        return sorted(candidates, key=sort_key)

    def _trigger_matches(self, trigger: str) -> List[StrategyRecord]:
        words = [w for w in trigger.lower().split() if len(w) >= TRIGGER_WORD_MIN_LENGTH]
        if not words:
            return []
        return [
            s for s in self.catalog.all_strategies()
            if any(word in s.description.lower() for word in words)
        ]
