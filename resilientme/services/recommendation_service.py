"""
Recommendation entry points used by the journal and mood check-in flows.

RecommendationService wires the keyword matcher and the selector together
and owns the "always succeeds" contract: a failure while recommending is
logged and turned into an empty result so that saving an entry is never
blocked. Category mapping errors are the exception; they mean the code is
inconsistent and are allowed to surface.
"""

from __future__ import annotations

import asyncio
import random
import time
from functools import lru_cache
from typing import Optional

from resilientme.config.logger import app_logger, log_performance
from resilientme.config.settings import settings
from resilientme.services.category_mapping import MappingError
from resilientme.services.keyword_matcher import CategoryMatcher, KeywordMatcher
from resilientme.services.presentation_state import RecommendedStrategiesState
from resilientme.services.recommendation_engine import (
    RecommendationRequest,
    RecommendationResult,
    RecommendationSelector,
)
from resilientme.services.sentiment import analyze_sentiment
from resilientme.services.strategy_catalog import StrategyCatalog, get_default_catalog


class RecommendationService:
    """Inbound boundary for coping-strategy recommendations."""

    def __init__(
        self,
        catalog: StrategyCatalog,
        matcher: Optional[CategoryMatcher] = None,
        selector: Optional[RecommendationSelector] = None,
        rng: Optional[random.Random] = None,
        journal_min_length: int = settings.JOURNAL_MIN_LENGTH,
    ):
        self.catalog = catalog
        self.matcher = matcher or KeywordMatcher()
        self.selector = selector or RecommendationSelector(catalog, rng=rng)
        self.journal_min_length = journal_min_length

    def recommend(
        self,
        text: Optional[str] = None,
        mood: Optional[str] = None,
        intensity: Optional[float] = None,
        trigger: Optional[str] = None,
        intensity_scale: int = 10,
    ) -> RecommendationResult:
        request = RecommendationRequest(
            text=text,
            mood=mood,
            intensity=intensity,
            intensity_scale=intensity_scale,
            trigger=trigger,
        )
        return self.recommend_for(request)

    def recommend_for(self, request: RecommendationRequest) -> RecommendationResult:
        start = time.perf_counter()
        if not request.has_context:
            app_logger.debug("No text or mood given, matching falls back to the default categories")
        try:
            categories = self.matcher.match(request.match_text)
            result = self.selector.select_for(request, categories)
        except MappingError:
            raise
        except Exception as exc:
            app_logger.exception(f"Recommendation failed, returning no strategies: {exc}")
            return RecommendationResult.empty()

        # Swapped-in matchers may hand back plain labels instead of enum members
        log_performance(
            "recommendation",
            time.perf_counter() - start,
            categories=sorted(str(getattr(c, "value", c)) for c in result.categories),
            results=len(result),
        )
        return result

    async def recommend_async(
        self,
        text: Optional[str] = None,
        mood: Optional[str] = None,
        intensity: Optional[float] = None,
        trigger: Optional[str] = None,
        intensity_scale: int = 10,
    ) -> RecommendationResult:
        """Same as recommend(), run in a worker thread so callers can await it off the event loop."""
        return await asyncio.to_thread(
            self.recommend,
            text=text,
            mood=mood,
            intensity=intensity,
            trigger=trigger,
            intensity_scale=intensity_scale,
        )

    def on_journal_saved(
        self,
        content: str,
        mood: Optional[str] = None,
        intensity: Optional[float] = None,
        intensity_scale: int = 10,
    ) -> Optional[RecommendedStrategiesState]:
        """
        Recommendation hook for a freshly saved journal entry.

        Short entries are skipped. Without a self-reported intensity the
        keyword sentiment reading supplies one.
        """
        if len(content or "") <= self.journal_min_length:
            return None

        if intensity is None:
            reading = analyze_sentiment(content)
            if reading is not None:
                intensity, intensity_scale = reading.intensity, 1

        result = self.recommend(
            text=content,
            mood=mood,
            intensity=intensity,
            intensity_scale=intensity_scale,
        )
        if result.is_empty:
            return None
        return RecommendedStrategiesState(result)

    async def on_journal_saved_async(
        self,
        content: str,
        mood: Optional[str] = None,
        intensity: Optional[float] = None,
        intensity_scale: int = 10,
    ) -> Optional[RecommendedStrategiesState]:
        return await asyncio.to_thread(
            self.on_journal_saved,
            content,
            mood=mood,
            intensity=intensity,
            intensity_scale=intensity_scale,
        )

    def on_mood_check_in(
        self,
        mood: str,
        intensity: float,
        trigger: Optional[str] = None,
        intensity_scale: int = 5,
    ) -> Optional[RecommendedStrategiesState]:
        """Recommendation hook for a saved mood check-in; only strong reactions get one."""
        if not self.selector.is_strong_reaction(intensity, intensity_scale):
            return None

        result = self.recommend(
            mood=mood,
            intensity=intensity,
            trigger=trigger,
            intensity_scale=intensity_scale,
        )
        if result.is_empty:
            return None
        return RecommendedStrategiesState(result)


@lru_cache(maxsize=1)
def get_recommendation_service() -> RecommendationService:
    """Process-wide service built on the seeded catalog."""
    rng = random.Random(settings.RECOMMENDATION_SEED)
    return RecommendationService(get_default_catalog(), rng=rng)
