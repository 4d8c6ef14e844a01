"""Unit tests for the seeded strategy catalog and the strategy types."""

import pytest

from resilientme.models.strategy import (
    StrategyCategory,
    StrategyDuration,
    StrategyIntensity,
    parse_duration,
)
from resilientme.services.category_mapping import MappingError
from resilientme.services.strategy_catalog import (
    STRATEGY_SEEDS,
    StrategyCatalog,
    build_strategy,
    get_default_catalog,
)


class TestStrategyCatalog:
    """Queries over the catalog built from STRATEGY_SEEDS."""

    def test_all_strategies_keep_seed_order(self, catalog):
        assert [s.id for s in catalog.all_strategies()] == [seed["id"] for seed in STRATEGY_SEEDS]

    def test_every_category_is_seeded(self, catalog):
        for category in StrategyCategory:
            assert catalog.strategies_for_category(category)

    def test_every_strategy_has_steps(self, catalog):
        for strategy in catalog.all_strategies():
            assert strategy.steps

    def test_category_filter(self, catalog):
        ids = [s.id for s in catalog.strategies_for_category(StrategyCategory.SELF_CARE)]
        assert ids == [
            "self-compassion-break",
            "achievements-quick-list",
            "soothing-ritual",
            "value-alignment",
        ]

    def test_intensity_filter(self, catalog):
        intensive = catalog.strategies_for_intensity(StrategyIntensity.INTENSIVE)
        assert intensive
        assert all(s.intensity == StrategyIntensity.INTENSIVE for s in intensive)
        assert catalog.quick_relief_strategies() == catalog.strategies_for_intensity(StrategyIntensity.QUICK)

    def test_empty_category_is_not_an_error(self, make_strategy):
        small = StrategyCatalog([make_strategy("only-one")])
        assert small.strategies_for_category(StrategyCategory.CREATIVE) == []

    def test_get_by_id(self, catalog):
        assert catalog.get("box-breathing").title == "Box Breathing Technique"
        assert catalog.get("missing") is None

    def test_mood_filter_includes_any_targets(self, catalog):
        ids = {s.id for s in catalog.strategies_for_mood("lonely")}
        assert "connection-quick-chat" in ids
        assert "self-compassion-break" in ids
        assert "box-breathing" not in ids

    def test_duplicate_ids_rejected(self, make_strategy):
        with pytest.raises(ValueError):
            StrategyCatalog([make_strategy("twice"), make_strategy("twice")])

    def test_default_catalog_is_shared(self):
        assert get_default_catalog() is get_default_catalog()
        assert len(get_default_catalog()) == len(STRATEGY_SEEDS)


class TestBuildStrategy:
    """Seed dicts are validated and normalised on load."""

    def _seed(self, **overrides):
        seed = {
            "id": "test-seed",
            "title": "Test Seed",
            "description": "Seed used in tests.",
            "category": "Self-Care",
            "steps": ["One step"],
        }
        seed.update(overrides)
        return seed

    def test_category_label_normalised(self):
        assert build_strategy(self._seed()).category == StrategyCategory.SELF_CARE

    def test_missing_intensity_defaults_to_moderate(self):
        strategy = build_strategy(self._seed())
        assert strategy.intensity == StrategyIntensity.MODERATE
        assert strategy.time_to_complete == "10-15 minutes"

    def test_empty_steps_rejected(self):
        with pytest.raises(ValueError):
            build_strategy(self._seed(steps=[]))

    def test_unknown_category_raises_mapping_error(self):
        with pytest.raises(MappingError):
            build_strategy(self._seed(category="Wellness"))


class TestStrategyTypes:
    """Intensity ordering, duration parsing and record identity."""

    def test_intensity_order(self):
        assert StrategyIntensity.QUICK < StrategyIntensity.MODERATE < StrategyIntensity.INTENSIVE
        assert sorted([StrategyIntensity.INTENSIVE, StrategyIntensity.QUICK]) == [
            StrategyIntensity.QUICK,
            StrategyIntensity.INTENSIVE,
        ]

    def test_intensity_order_all_comparisons(self):
        """Every comparison follows the effort tier, not the string value."""
        assert StrategyIntensity.MODERATE <= StrategyIntensity.INTENSIVE
        assert StrategyIntensity.QUICK <= StrategyIntensity.QUICK
        assert StrategyIntensity.INTENSIVE >= StrategyIntensity.MODERATE
        assert StrategyIntensity.INTENSIVE > StrategyIntensity.QUICK
        assert not StrategyIntensity.MODERATE >= StrategyIntensity.INTENSIVE
        assert max(StrategyIntensity) == StrategyIntensity.INTENSIVE
        assert min(StrategyIntensity) == StrategyIntensity.QUICK

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Under 2 minutes", StrategyDuration.VERY_SHORT),
            ("3-5 minutes", StrategyDuration.SHORT),
            ("5-10 minutes", StrategyDuration.MEDIUM),
            ("15-20 minutes", StrategyDuration.LONG),
            ("30+ minutes", StrategyDuration.LONG),
            ("Varies", StrategyDuration.MEDIUM),
        ],
    )
    def test_parse_duration(self, text, expected):
        assert parse_duration(text) == expected

    def test_duration_tier(self):
        assert StrategyDuration.VERY_SHORT.tier == StrategyIntensity.QUICK
        assert StrategyDuration.LONG.tier == StrategyIntensity.INTENSIVE
        assert StrategyDuration.LONG.label == "Over 15 minutes"

    def test_records_compare_by_id(self, make_strategy):
        a = make_strategy("same", description="first")
        b = make_strategy("same", description="second")
        assert a == b
        assert len({a, b}) == 1

    def test_targets_mood(self, make_strategy):
        strategy = make_strategy("s", mood_targets=("Anxious", "Sad"))
        assert strategy.targets_mood("anxious")
        assert not strategy.targets_mood("Angry")
        assert not strategy.targets_mood("")
        assert make_strategy("any", mood_targets=("Any",)).targets_mood("Angry")
