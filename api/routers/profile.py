"""
User profile router.

The profile holds fitness preferences and the ids of completed
challenges. Saving merges the submitted fields into the stored profile.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_profile_service
from application.exceptions import ProfileNotFoundError
from models.profile import UserProfile, UserProfileUpdate
from services.profile_service import ProfileService

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
)


@router.get("/me", response_model=UserProfile)
def get_my_profile(
    user_id: str = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Get the current user's profile.

    Raises:
        HTTPException 404: If the user has not saved a profile yet
    """
    try:
        return profiles.get_profile(user_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/me", response_model=UserProfile)
def save_my_profile(
    update: UserProfileUpdate,
    user_id: str = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
):
    return profiles.save_profile(user_id, update)
