"""Strategy catalog and effectiveness rating endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from resilientme.config.logger import app_logger
from resilientme.api.strategies.schemas import (
    CategoryOut,
    EffectivenessOut,
    RatingOut,
    RatingRequest,
    StrategyOut,
    StrategyScore,
    StrategyTrendOut,
)
from resilientme.models.strategy import StrategyCategory, StrategyIntensity
from resilientme.services.category_mapping import parse_category
from resilientme.services.strategy_catalog import StrategyCatalog, get_default_catalog
from resilientme.services.strategy_effectiveness import (
    StrategyEffectivenessStore,
    get_effectiveness_store,
)
from resilientme.utils.responses import SuccessResponse, success_response

router = APIRouter(prefix="/v1/strategies", tags=["strategies"])


@router.get(
    "",
    response_model=SuccessResponse[List[StrategyOut]],
    summary="List coping strategies",
)
async def list_strategies(
    category: Optional[str] = Query(default=None, description="Category label in any known taxonomy (e.g. 'Self-Care', 'selfCare')."),
    intensity: Optional[StrategyIntensity] = Query(default=None),
    mood: Optional[str] = Query(default=None, description="Only strategies targeting this mood."),
    catalog: StrategyCatalog = Depends(get_default_catalog),
) -> SuccessResponse[List[StrategyOut]]:
    strategies = list(catalog.all_strategies())

    if category is not None:
        resolved = parse_category(category)
        if resolved is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown strategy category: {category}",
            )
        strategies = [s for s in strategies if s.category == resolved]
    if intensity is not None:
        strategies = [s for s in strategies if s.intensity == intensity]
    if mood:
        strategies = [s for s in strategies if s.targets_mood(mood)]

    return success_response(
        data=[StrategyOut.from_record(s) for s in strategies],
        message=f"{len(strategies)} strategies",
    )


@router.get(
    "/categories",
    response_model=SuccessResponse[List[CategoryOut]],
    summary="List canonical strategy categories",
)
async def list_categories(
    catalog: StrategyCatalog = Depends(get_default_catalog),
) -> SuccessResponse[List[CategoryOut]]:
    data = [
        CategoryOut.from_category(category, len(catalog.strategies_for_category(category)))
        for category in StrategyCategory
    ]
    return success_response(data=data, message="Strategy categories")


@router.get(
    "/effectiveness",
    response_model=SuccessResponse[EffectivenessOut],
    summary="Most effective and most used strategies",
)
async def strategy_effectiveness(
    limit: int = Query(default=5, ge=1, le=50),
    store: StrategyEffectivenessStore = Depends(get_effectiveness_store),
) -> SuccessResponse[EffectivenessOut]:
    data = EffectivenessOut(
        most_effective=[StrategyScore(strategy=name, value=avg) for name, avg in store.most_effective(limit)],
        most_used=[StrategyScore(strategy=name, value=count) for name, count in store.most_used(limit)],
    )
    return success_response(data=data, message="Strategy effectiveness")


@router.get(
    "/{strategy_id}",
    response_model=SuccessResponse[StrategyOut],
    summary="Get a single strategy",
)
async def get_strategy(
    strategy_id: str,
    catalog: StrategyCatalog = Depends(get_default_catalog),
) -> SuccessResponse[StrategyOut]:
    record = catalog.get(strategy_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Strategy not found: {strategy_id}",
        )
    return success_response(data=StrategyOut.from_record(record), message="Strategy retrieved")


@router.post(
    "/{strategy_id}/ratings",
    response_model=SuccessResponse[RatingOut],
    status_code=status.HTTP_201_CREATED,
    summary="Rate how helpful a strategy was",
)
async def rate_strategy(
    strategy_id: str,
    payload: RatingRequest,
    catalog: StrategyCatalog = Depends(get_default_catalog),
    store: StrategyEffectivenessStore = Depends(get_effectiveness_store),
) -> SuccessResponse[RatingOut]:
    if catalog.get(strategy_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Strategy not found: {strategy_id}",
        )

    entry = store.add_rating(
        strategy=strategy_id,
        rating=payload.rating,
        mood_before=payload.mood_before,
        mood_after=payload.mood_after,
        mood_impact=payload.mood_impact,
        notes=payload.notes,
        completion_time=payload.completion_time,
    )
    app_logger.info(f"Strategy {strategy_id} rated {payload.rating}")

    data = RatingOut(
        id=str(entry.id),
        strategy=entry.strategy,
        rating=entry.rating,
        timestamp=entry.timestamp,
        average_rating=store.average_rating(strategy_id),
        completion_count=store.completion_count(strategy_id),
    )
    return success_response(data=data, message="Rating recorded")


@router.get(
    "/{strategy_id}/trend",
    response_model=SuccessResponse[StrategyTrendOut],
    summary="Recent rating trend for a strategy",
)
async def strategy_trend(
    strategy_id: str,
    catalog: StrategyCatalog = Depends(get_default_catalog),
    store: StrategyEffectivenessStore = Depends(get_effectiveness_store),
) -> SuccessResponse[StrategyTrendOut]:
    if catalog.get(strategy_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Strategy not found: {strategy_id}",
        )

    data = StrategyTrendOut(
        strategy=strategy_id,
        ratings=store.strategy_trend(strategy_id),
        average_rating=store.average_rating(strategy_id),
    )
    return success_response(data=data, message="Strategy trend")
