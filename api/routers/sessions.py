"""
Workout sessions router.

Sessions are written at their two boundaries only: start and completion.
Timer state lives on the client.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import get_current_user, get_progress_service
from application.exceptions import SessionNotFoundError
from models.session import (
    CompleteSessionRequest,
    StartSessionRequest,
    StartSessionResponse,
    WorkoutSession,
)
from services.progress_service import ProgressService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


def _get_session_or_404(
    session_id: str,
    user_id: str,
    progress: ProgressService,
) -> WorkoutSession:
    """
    Get a session owned by the user.

    Sessions of other users are reported as not found.
    """
    try:
        session = progress.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if session.user_id != user_id:
        raise HTTPException(status_code=404, detail=f"Workout session {session_id} not found")
    return session


@router.post("", response_model=StartSessionResponse, status_code=status.HTTP_201_CREATED)
def start_session(
    request: StartSessionRequest,
    user_id: str = Depends(get_current_user),
    progress: ProgressService = Depends(get_progress_service),
):
    """Record the start of a workout session."""
    session_id = progress.start_session(user_id, request.workout)
    return StartSessionResponse(session_id=session_id)


@router.get("", response_model=List[WorkoutSession])
def list_sessions(
    user_id: str = Depends(get_current_user),
    progress: ProgressService = Depends(get_progress_service),
):
    """List the user's sessions, most recently started first."""
    return progress.list_sessions(user_id)


@router.get("/{session_id}", response_model=WorkoutSession)
def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    progress: ProgressService = Depends(get_progress_service),
):
    return _get_session_or_404(session_id, user_id, progress)


@router.post("/{session_id}/complete", response_model=WorkoutSession)
def complete_session(
    session_id: str,
    request: CompleteSessionRequest,
    user_id: str = Depends(get_current_user),
    progress: ProgressService = Depends(get_progress_service),
):
    """
    Complete a session.

    Updates the user's stats and advances their open challenges.
    Completing an already-completed session returns it unchanged.
    """
    _get_session_or_404(session_id, user_id, progress)
    try:
        return progress.complete_session(session_id, request.duration_minutes)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
