"""Unit tests for recommendation selection."""

import random

import pytest

from resilientme.models.strategy import StrategyCategory, StrategyIntensity
from resilientme.services.keyword_matcher import match_categories
from resilientme.services.recommendation_engine import (
    RecommendationRequest,
    RecommendationResult,
    RecommendationSelector,
    dedupe_strategies,
    normalize_intensity,
)
from resilientme.services.strategy_catalog import StrategyCatalog

ALL_CATEGORIES = frozenset(StrategyCategory)


def _recommend(catalog, text=None, mood=None, intensity=None, trigger=None, seed=42, intensity_scale=10):
    selector = RecommendationSelector(catalog, rng=random.Random(seed))
    request = RecommendationRequest(
        text=text, mood=mood, intensity=intensity, intensity_scale=intensity_scale, trigger=trigger
    )
    return selector.select_for(request, match_categories(request.match_text))


class TestNormalizeIntensity:
    """Intensity is compared as a fraction of the caller's scale."""

    def test_none_passes_through(self):
        assert normalize_intensity(None) is None

    def test_scale_endpoints(self):
        assert normalize_intensity(1, 10) == 0.0
        assert normalize_intensity(10, 10) == 1.0
        assert normalize_intensity(5, 5) == 1.0

    def test_clamped(self):
        assert normalize_intensity(0, 10) == 0.0
        assert normalize_intensity(15, 10) == 1.0

    def test_fraction_scale(self):
        assert normalize_intensity(0.85, 1) == 0.85

    @pytest.mark.parametrize(
        "intensity, scale, strong",
        [(8, 10, True), (7, 10, False), (10, 10, True), (4, 5, True), (3, 5, False), (None, 10, False)],
    )
    def test_strong_reaction_threshold(self, catalog, intensity, scale, strong):
        selector = RecommendationSelector(catalog)
        assert selector.is_strong_reaction(intensity, scale) is strong


class TestRecommendationResult:
    def test_empty(self):
        result = RecommendationResult.empty()
        assert result.is_empty
        assert len(result) == 0
        assert list(result) == []

    def test_dedupe_keeps_first(self, make_strategy):
        first = make_strategy("a", description="first")
        unique = dedupe_strategies([first, make_strategy("b"), make_strategy("a", description="second")])
        assert [s.id for s in unique] == ["a", "b"]
        assert unique[0].description == "first"


class TestRecommendationSelector:
    """Selection bounds, dedupe, ranking and trigger handling."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "I felt so rejected and sad after the interview",
            "anxious sad stress lonely angry happy",
            "anxious sad stress lonely angry happy calm worried frustrated disappointed rejected",
        ],
    )
    def test_bounded_and_unique(self, catalog, text):
        result = _recommend(catalog, text=text, mood="Anxious", intensity=9, trigger="rejection at work")
        assert len(result) <= 5
        assert len(set(result.strategy_ids)) == len(result)

    def test_per_category_cap(self, ordered_selector):
        result = ordered_selector.select({StrategyCategory.MINDFULNESS})
        assert result.strategy_ids == ["grounding-5-4-3-2-1", "box-breathing"]

    def test_all_categories_capped_at_five(self, ordered_selector):
        result = ordered_selector.select(ALL_CATEGORIES)
        assert len(result) == 5
        assert result.categories == ALL_CATEGORIES

    def test_mood_fit_leads_within_tier(self, ordered_selector):
        result = ordered_selector.select({StrategyCategory.SELF_CARE}, mood="Lonely")
        assert result.strategy_ids == ["self-compassion-break", "soothing-ritual"]

    def test_tier_preference_ranks_before_mood_fit(self, ordered_selector):
        """A mild reaction keeps an intensive strategy out even when it targets the mood."""
        result = ordered_selector.select({StrategyCategory.COGNITIVE}, mood="Anxious", intensity=2)
        assert result.strategy_ids == ["thought-challenge", "rain-for-rejection"]

    def test_strong_reaction_puts_intensive_first(self, ordered_selector):
        result = ordered_selector.select({StrategyCategory.COGNITIVE}, mood="Anxious", intensity=8)
        assert result.strategy_ids == ["growth-mindset-development", "thought-challenge"]

    def test_trigger_adds_related_strategies(self, ordered_selector):
        result = ordered_selector.select({StrategyCategory.SELF_CARE}, trigger="rejection")
        assert result.strategy_ids == [
            "self-compassion-break",
            "achievements-quick-list",
            "rain-for-rejection",
            "growth-from-rejection",
        ]

    def test_short_trigger_words_ignored(self, ordered_selector):
        result = ordered_selector.select({StrategyCategory.SELF_CARE}, trigger="a to")
        assert result.strategy_ids == ["self-compassion-break", "achievements-quick-list"]

    def test_dedupe_across_categories(self, make_strategy):
        shared = make_strategy("shared", category=StrategyCategory.SOCIAL, description="call a friend")
        catalog = StrategyCatalog([shared, make_strategy("other", category=StrategyCategory.SELF_CARE)])
        selector = RecommendationSelector(catalog, rng=random.Random(1))
        result = selector.select({StrategyCategory.SOCIAL}, trigger="friend")
        assert result.strategy_ids == ["shared"]

    def test_missing_category_degrades(self, make_strategy):
        """A matched category with no strategies contributes nothing."""
        catalog = StrategyCatalog([make_strategy("care", category=StrategyCategory.SELF_CARE)])
        assert _recommend(catalog, text="happy").is_empty
        assert _recommend(catalog, text="happy but sad").strategy_ids == ["care"]

    def test_empty_catalog(self):
        result = _recommend(StrategyCatalog([]), text="anxious")
        assert result.is_empty


class TestScenarios:
    """End-to-end selection over the seeded catalog."""

    def test_rejection_journal_entry(self, catalog):
        result = _recommend(catalog, text="I felt so rejected and sad after the interview")
        assert result.categories == {StrategyCategory.SELF_CARE}
        assert set(result.strategy_ids) == {"self-compassion-break", "achievements-quick-list"}
        assert all(s.category == StrategyCategory.SELF_CARE for s in result)

    def test_empty_text_uses_defaults(self, catalog):
        result = _recommend(catalog, text="")
        assert result.categories == {StrategyCategory.SELF_CARE, StrategyCategory.MINDFULNESS}
        assert not result.is_empty
        assert {s.category for s in result} == {StrategyCategory.SELF_CARE, StrategyCategory.MINDFULNESS}

    def test_strong_reaction_allows_intensive(self, catalog):
        result = _recommend(catalog, mood="Anxious", intensity=8)
        assert result.strong_reaction
        assert set(result.strategy_ids) == {"growth-mindset-development", "thought-challenge"}
        assert any(s.intensity == StrategyIntensity.INTENSIVE for s in result)

    def test_mild_reaction_prefers_quick_and_moderate(self, catalog):
        result = _recommend(catalog, mood="Anxious", intensity=2)
        assert not result.strong_reaction
        assert set(result.strategy_ids) == {"thought-challenge", "rain-for-rejection"}
        assert all(s.intensity != StrategyIntensity.INTENSIVE for s in result)

    def test_same_seed_same_result(self, catalog):
        text = "anxious and lonely, angry at myself, sad and stressed"
        first = _recommend(catalog, text=text, seed=7)
        second = _recommend(catalog, text=text, seed=7)
        assert first.strategy_ids == second.strategy_ids
        assert len(first) == 5
