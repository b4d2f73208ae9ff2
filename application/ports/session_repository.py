"""
Workout session repository port (interface).

Sessions are written only at their boundaries: once on start and
once on completion. Nothing is persisted during timer ticks.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol


class SessionRepository(Protocol):
    """Repository interface for workout session persistence."""

    def create(
        self,
        user_id: str,
        workout_id: str,
        workout: Dict[str, Any],
        start_time: datetime,
    ) -> Dict[str, Any]:
        """
        Create a new, incomplete session.

        Args:
            user_id: Owner of the session
            workout_id: Workout being played
            workout: Snapshot of the workout
            start_time: When the session started

        Returns:
            Created session dictionary (including its id)
        """
        ...

    def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a session by id.

        Returns:
            Session dictionary if found, None otherwise
        """
        ...

    def mark_completed(
        self,
        session_id: str,
        end_time: datetime,
        duration_minutes: float,
    ) -> Optional[Dict[str, Any]]:
        """
        Mark a session complete.

        Returns:
            Updated session dictionary, None if the session does not exist
        """
        ...

    def list_open(self, user_id: str) -> List[Dict[str, Any]]:
        """
        List a user's sessions that have not been completed.

        Returns:
            List of session dictionaries
        """
        ...

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        List all of a user's sessions, most recently started first.

        Returns:
            List of session dictionaries
        """
        ...
