"""
Coach router.

Chat with the fitness coach and get insights on a finished workout.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_coach_service, get_current_user
from models.coach import ChatRequest, ChatResponse, InsightsResponse, PerformanceSummary
from services.coach_service import CoachService, analyze_performance

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/coach",
    tags=["Coach"],
)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    user_id: str = Depends(get_current_user),
    coach: CoachService = Depends(get_coach_service),
):
    """
    Ask the coach a question.

    Falls back to rule-based answers when the LLM is not configured
    or unavailable.
    """
    logger.info(f"Coach chat for user {user_id} ({len(request.history)} prior turns)")
    try:
        return await coach.chat(request.message, request.history)
    except Exception as e:
        logger.exception(f"Unexpected error during coach chat: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred while contacting the coach",
        )


@router.post("/insights", response_model=InsightsResponse)
def insights(
    summary: PerformanceSummary,
    user_id: str = Depends(get_current_user),
):
    """Turn a finished workout summary into short insights."""
    return InsightsResponse(insights=analyze_performance(summary))
