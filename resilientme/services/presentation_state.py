"""Holder for a recommendation result that the client presents once, modally."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple
from uuid import UUID, uuid4

from resilientme.models.strategy import StrategyRecord
from resilientme.services.recommendation_engine import RecommendationResult


@dataclass(frozen=True, eq=False)
class RecommendedStrategiesState:
    """
    One presentation event for a recommendation.

    Every construction gets a fresh id and compares by identity, so two states
    holding the same strategies are still two separate presentations.
    """

    result: RecommendationResult
    id: UUID = field(default_factory=uuid4)

    @property
    def strategies(self) -> Tuple[StrategyRecord, ...]:
        return self.result.strategies
