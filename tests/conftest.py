"""Shared fixtures for the coping core test suite."""

import os
import random

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from resilientme.models.strategy import StrategyCategory, StrategyIntensity, StrategyRecord
from resilientme.services.recommendation_engine import RecommendationSelector
from resilientme.services.strategy_catalog import STRATEGY_SEEDS, StrategyCatalog


def _build_strategy(
    strategy_id: str,
    category: StrategyCategory = StrategyCategory.SELF_CARE,
    intensity: StrategyIntensity = StrategyIntensity.QUICK,
    description: str = "A short coping exercise.",
    mood_targets=(),
) -> StrategyRecord:
    return StrategyRecord(
        id=strategy_id,
        title=strategy_id.replace("-", " ").title(),
        description=description,
        category=category,
        intensity=intensity,
        time_to_complete=intensity.time_estimate,
        steps=("Pause.", "Breathe."),
        mood_targets=tuple(mood_targets),
    )


@pytest.fixture
def catalog() -> StrategyCatalog:
    """Fresh catalog built from the standard seed list."""
    return StrategyCatalog.from_seeds(STRATEGY_SEEDS)


@pytest.fixture
def ordered_selector(catalog) -> RecommendationSelector:
    """Selector with shuffling off so output order can be asserted."""
    return RecommendationSelector(catalog, rng=random.Random(0), shuffle=False)


@pytest.fixture
def make_strategy():
    """Factory for hand-built strategy records."""
    return _build_strategy
