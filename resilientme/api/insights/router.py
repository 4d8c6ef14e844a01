"""Mood-history insight and journal prompt endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from resilientme.config.logger import app_logger
from resilientme.config.settings import settings
from resilientme.api.insights.schemas import (
    JournalPromptOut,
    NudgeOut,
    PatternAnalysisOut,
    PatternAnalysisRequest,
    PatternOut,
)
from resilientme.services.journal_prompts import prompt_for_mood, trigger_group
from resilientme.services.mood_patterns import adaptive_nudges, analyze_patterns
from resilientme.services.strategy_catalog import StrategyCatalog, get_default_catalog
from resilientme.utils.responses import SuccessResponse, success_response

router = APIRouter(prefix="/v1/insights", tags=["insights"])


@router.post(
    "/patterns",
    response_model=SuccessResponse[PatternAnalysisOut],
    summary="Detect recurring mood patterns in a check-in history",
)
def analyze_mood_patterns(
    payload: PatternAnalysisRequest,
    catalog: StrategyCatalog = Depends(get_default_catalog),
) -> SuccessResponse[PatternAnalysisOut]:
    check_ins = [item.to_check_in() for item in payload.check_ins]
    threshold = payload.threshold or settings.INSIGHT_THRESHOLD

    patterns = analyze_patterns(check_ins, threshold)
    nudges = adaptive_nudges(check_ins, threshold)
    app_logger.info(f"Pattern analysis: {len(patterns)} patterns, {len(nudges)} nudges")

    data = PatternAnalysisOut(
        patterns=[PatternOut.from_pattern(p, catalog) for p in patterns],
        nudges=[NudgeOut.from_nudge(n) for n in nudges],
    )
    message = "No patterns detected" if not patterns and not nudges else "Patterns detected"
    return success_response(data=data, message=message)


@router.get(
    "/journal-prompt",
    response_model=SuccessResponse[JournalPromptOut],
    summary="Journal prompt for a mood and optional rejection trigger",
)
async def journal_prompt(
    mood: Optional[str] = Query(default=None, max_length=50),
    trigger: Optional[str] = Query(default=None, max_length=200),
) -> SuccessResponse[JournalPromptOut]:
    data = JournalPromptOut(
        prompt=prompt_for_mood(mood, trigger),
        mood=mood,
        trigger_group=trigger_group(trigger),
    )
    return success_response(data=data, message="Journal prompt")
