"""
Challenges router.

This router provides endpoints for:
- Listing active challenges
- Listing the user's joined challenges
- Joining a challenge
- Storing, listing and joining challenges generated for the user
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import get_challenge_service, get_current_user
from application.exceptions import ChallengeNotFoundError
from models.challenge import (
    Challenge,
    GeneratedChallenge,
    GeneratedChallengeCreate,
    UserChallenge,
)
from services.challenge_service import ChallengeService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/challenges",
    tags=["Challenges"],
)


@router.get("", response_model=List[Challenge])
def list_challenges(
    challenges: ChallengeService = Depends(get_challenge_service),
):
    return challenges.list_available()


@router.get("/me", response_model=List[UserChallenge])
def my_challenges(
    user_id: str = Depends(get_current_user),
    challenges: ChallengeService = Depends(get_challenge_service),
):
    """List the user's challenges, most recently started first."""
    return challenges.list_for_user(user_id)


@router.post(
    "/{challenge_id}/join",
    response_model=UserChallenge,
    status_code=status.HTTP_201_CREATED,
)
def join_challenge(
    challenge_id: str,
    user_id: str = Depends(get_current_user),
    challenges: ChallengeService = Depends(get_challenge_service),
):
    """
    Join a challenge.

    Raises:
        HTTPException 404: If the challenge does not exist
    """
    try:
        return challenges.join(user_id, challenge_id)
    except ChallengeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/generated", response_model=List[GeneratedChallenge])
def list_generated_challenges(
    user_id: str = Depends(get_current_user),
    challenges: ChallengeService = Depends(get_challenge_service),
):
    """List the active challenges generated for the current user."""
    return challenges.list_generated(user_id)


@router.post(
    "/generated",
    response_model=List[GeneratedChallenge],
    status_code=status.HTTP_201_CREATED,
)
def save_generated_challenges(
    request: List[GeneratedChallengeCreate],
    user_id: str = Depends(get_current_user),
    challenges: ChallengeService = Depends(get_challenge_service),
):
    return challenges.save_generated(user_id, request)


@router.post(
    "/generated/{challenge_id}/join",
    response_model=UserChallenge,
    status_code=status.HTTP_201_CREATED,
)
def join_generated_challenge(
    challenge_id: str,
    user_id: str = Depends(get_current_user),
    challenges: ChallengeService = Depends(get_challenge_service),
):
    """
    Join one of the user's generated challenges.

    Raises:
        HTTPException 404: If the user has no such generated challenge
    """
    try:
        return challenges.join_generated(user_id, challenge_id)
    except ChallengeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
