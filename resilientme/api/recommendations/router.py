"""Coping-strategy recommendation endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from resilientme.config.logger import app_logger
from resilientme.api.recommendations.schemas import (
    JournalRecommendRequest,
    PresentationOut,
    RecommendationOut,
    RecommendRequest,
)
from resilientme.services.recommendation_service import (
    RecommendationService,
    get_recommendation_service,
)
from resilientme.utils.responses import SuccessResponse, success_response

router = APIRouter(prefix="/v1/recommendations", tags=["recommendations"])


@router.post(
    "",
    response_model=SuccessResponse[RecommendationOut],
    summary="Recommend coping strategies for text and/or a mood",
)
async def recommend(
    payload: RecommendRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> SuccessResponse[RecommendationOut]:
    result = await service.recommend_async(
        text=payload.text,
        mood=payload.mood,
        intensity=payload.intensity,
        trigger=payload.trigger,
        intensity_scale=payload.intensity_scale,
    )
    message = "No recommendation to show" if result.is_empty else f"{len(result)} strategies recommended"
    return success_response(data=RecommendationOut.from_result(result), message=message)


@router.post(
    "/journal",
    response_model=SuccessResponse[Optional[PresentationOut]],
    summary="Recommendation hook for a saved journal entry",
)
async def recommend_for_journal(
    payload: JournalRecommendRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> SuccessResponse[Optional[PresentationOut]]:
    state = await service.on_journal_saved_async(
        payload.content,
        mood=payload.mood,
        intensity=payload.intensity,
        intensity_scale=payload.intensity_scale,
    )
    if state is None:
        app_logger.info("Journal entry saved without recommendations")
        return success_response(data=None, message="No recommendation to show")
    return success_response(data=PresentationOut.from_state(state), message="Recommendations ready")
