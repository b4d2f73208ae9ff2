"""
Challenge repository port (interface).

Challenges are shared definitions; user challenges track one user's
progress against a snapshot of the challenge they joined.
"""

from typing import Any, Dict, List, Optional, Protocol


class ChallengeRepository(Protocol):
    """Repository interface for challenges and user participation."""

    def list_active(self) -> List[Dict[str, Any]]:
        """
        List challenges that can currently be joined.

        Returns:
            List of challenge dictionaries
        """
        ...

    def get(self, challenge_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a challenge by id.

        Returns:
            Challenge dictionary if found, None otherwise
        """
        ...

    def create_user_challenge(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Record that a user joined a challenge.

        Args:
            data: User challenge fields (user_id, challenge_id, challenge,
                  start_date, end_date, current, progress, completed)

        Returns:
            Created user challenge dictionary (including its id)
        """
        ...

    def list_user_challenges(
        self,
        user_id: str,
        completed: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """
        List a user's challenges.

        Args:
            user_id: The user's ID
            completed: If set, only challenges with that completion state

        Returns:
            List of user challenge dictionaries
        """
        ...

    def update_user_challenge(
        self,
        user_challenge_id: str,
        updates: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Update progress fields on a user challenge.

        Returns:
            Updated user challenge dictionary
        """
        ...

    def save_generated(
        self,
        user_id: str,
        challenges: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Store challenges generated for one user.

        A challenge with an id the user already has replaces it.

        Returns:
            The stored challenge dictionaries
        """
        ...

    def list_generated(self, user_id: str) -> List[Dict[str, Any]]:
        """
        List a user's active generated challenges.

        Returns:
            List of generated challenge dictionaries
        """
        ...

    def get_generated(self, user_id: str, challenge_id: str) -> Optional[Dict[str, Any]]:
        """
        Get one of a user's generated challenges.

        Returns:
            Generated challenge dictionary if found, None otherwise
        """
        ...
