"""
User profile repository port (interface).

One profile per user. Saves merge into the stored profile.
"""

from typing import Any, Dict, Optional, Protocol


class ProfileRepository(Protocol):
    """Repository interface for user profiles."""

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a user's profile.

        Returns:
            Profile dictionary if found, None otherwise
        """
        ...

    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create the profile or merge fields into the existing one.

        Args:
            user_id: The user's ID
            fields: Profile fields to write

        Returns:
            The stored profile dictionary
        """
        ...

    def add_completed_challenge(self, user_id: str, challenge_id: str) -> Dict[str, Any]:
        """
        Add a challenge id to the profile's completed challenges.

        Adding an id that is already present leaves the list unchanged.

        Returns:
            The stored profile dictionary
        """
        ...
