"""
Saved workout repository port (interface).
"""

from typing import Any, Dict, List, Protocol


class SavedWorkoutRepository(Protocol):
    """Repository interface for a user's workout library."""

    def add(self, user_id: str, workout: Dict[str, Any]) -> Dict[str, Any]:
        """
        Save a workout for a user.

        Args:
            user_id: Owner of the workout
            workout: Cleaned workout fields (name, exercises, is_custom, category)

        Returns:
            Created workout dictionary (including id and created_at)
        """
        ...

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        List a user's saved workouts, newest first.

        Returns:
            List of workout dictionaries
        """
        ...

    def delete(self, user_id: str, workout_id: str) -> bool:
        """
        Delete a saved workout.

        Returns:
            True if a workout was deleted, False if it did not exist
        """
        ...
