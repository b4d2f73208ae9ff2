"""Profile service: read and merge-save user profiles."""

import logging

from application.exceptions import ProfileNotFoundError
from application.ports import ProfileRepository
from models.profile import UserProfile, UserProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for user profiles."""

    def __init__(self, profile_repo: ProfileRepository):
        self._repo = profile_repo

    def get_profile(self, user_id: str) -> UserProfile:
        """
        Get a user's profile.

        Raises:
            ProfileNotFoundError: If the user has never saved a profile
        """
        data = self._repo.get(user_id)
        if data is None:
            raise ProfileNotFoundError(user_id)
        return UserProfile.model_validate(data)

    def save_profile(self, user_id: str, update: UserProfileUpdate) -> UserProfile:
        """Merge the provided fields into the user's profile."""
        fields = update.model_dump(exclude_unset=True)
        saved = self._repo.upsert(user_id, fields)
        logger.info(f"Saved profile for user {user_id}: {sorted(fields)}")
        return UserProfile.model_validate(saved)
