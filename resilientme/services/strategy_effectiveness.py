"""
In-memory record of how helpful users found the strategies they tried.

Ratings are kept per process; persisting them is the storage layer's job.
"""

from __future__ import annotations

import threading
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, List, Optional, Tuple
from uuid import UUID, uuid4

from resilientme.config.logger import app_logger


MIN_RATING = 1
MAX_RATING = 5
TREND_SIZE = 5


@dataclass(frozen=True)
class StrategyRating:
    """A single rating a user gave a strategy after trying it."""

    strategy: str
    rating: int
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    mood_before: Optional[str] = None
    mood_after: Optional[str] = None
    mood_impact: Optional[str] = None
    notes: Optional[str] = None
    completion_time: Optional[float] = None  # seconds


class StrategyEffectivenessStore:
    """Collects strategy ratings and answers simple aggregate queries."""

    def __init__(self):
        self._ratings: List[StrategyRating] = []
        self._lock = threading.Lock()

    def add_rating(
        self,
        strategy: str,
        rating: int,
        mood_before: Optional[str] = None,
        mood_after: Optional[str] = None,
        mood_impact: Optional[str] = None,
        notes: Optional[str] = None,
        completion_time: Optional[float] = None,
        timestamp: Optional[datetime] = None,
    ) -> StrategyRating:
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")

        entry = StrategyRating(
            strategy=strategy,
            rating=rating,
            timestamp=timestamp or datetime.now(timezone.utc),
            mood_before=mood_before,
            mood_after=mood_after,
            mood_impact=mood_impact,
            notes=notes,
            completion_time=completion_time,
        )
        with self._lock:
            self._ratings.append(entry)
        app_logger.debug(f"Recorded rating {rating} for strategy {strategy!r}")
        return entry

    def ratings(self) -> List[StrategyRating]:
        with self._lock:
            return list(self._ratings)

    def _ratings_for(self, strategy: str) -> List[StrategyRating]:
        return [r for r in self.ratings() if r.strategy == strategy]

    def average_rating(self, strategy: str) -> float:
        """Mean rating for a strategy; 0.0 when it has never been rated."""
        values = [r.rating for r in self._ratings_for(strategy)]
        if not values:
            return 0.0
        return sum(values) / len(values)

    def completion_count(self, strategy: str) -> int:
        return len(self._ratings_for(strategy))

    def rating_history(self, strategy: str) -> List[Tuple[datetime, int]]:
        """(timestamp, rating) pairs for a strategy, oldest first."""
        history = sorted(self._ratings_for(strategy), key=lambda r: r.timestamp)
        return [(r.timestamp, r.rating) for r in history]

    def strategy_trend(self, strategy: str, size: int = TREND_SIZE) -> List[float]:
        """
        The latest `size` ratings, oldest first, for charting.

        Fewer ratings are padded with trailing zeros so the series always has
        `size` points.
        """
        values = [float(rating) for _, rating in self.rating_history(strategy)]
        if len(values) < size:
            return values + [0.0] * (size - len(values))
        return values[-size:]

    def most_effective(self, limit: int = 5) -> List[Tuple[str, float]]:
        """Strategies with the highest average rating."""
        grouped: Dict[str, List[int]] = defaultdict(list)
        for entry in self.ratings():
            grouped[entry.strategy].append(entry.rating)
        averages = [(name, sum(values) / len(values)) for name, values in grouped.items()]
        averages.sort(key=lambda item: item[1], reverse=True)
        return averages[:limit]

    def most_used(self, limit: int = 5) -> List[Tuple[str, int]]:
        """Strategies rated most often."""
        counts = Counter(entry.strategy for entry in self.ratings())
        return counts.most_common(limit)

    def clear(self) -> None:
        with self._lock:
            self._ratings.clear()


@lru_cache(maxsize=1)
def get_effectiveness_store() -> StrategyEffectivenessStore:
    """Process-wide ratings store used by the HTTP layer."""
    return StrategyEffectivenessStore()
