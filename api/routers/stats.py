"""User stats router."""

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_progress_service
from models.session import UserStats
from services.progress_service import ProgressService

router = APIRouter(
    prefix="/stats",
    tags=["Stats"],
)


@router.get("/me", response_model=UserStats)
def my_stats(
    user_id: str = Depends(get_current_user),
    progress: ProgressService = Depends(get_progress_service),
):
    """Get the current user's stats, creating defaults on first access."""
    return progress.get_stats(user_id)
