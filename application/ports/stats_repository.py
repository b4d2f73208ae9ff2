"""
User stats repository port (interface).
"""

from datetime import datetime
from typing import Any, Dict, Optional, Protocol


class StatsRepository(Protocol):
    """Repository interface for per-user aggregate stats."""

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get stats for a user.

        Returns:
            Stats dictionary if found, None otherwise
        """
        ...

    def create(self, user_id: str) -> Dict[str, Any]:
        """
        Create default stats for a user (level 1, zero counters).

        Returns:
            Created stats dictionary
        """
        ...

    def record_workout(
        self,
        user_id: str,
        duration_minutes: float,
        completed_at: datetime,
    ) -> Dict[str, Any]:
        """
        Add one completed workout to the user's counters.

        Increments total and weekly workouts, adds duration/60 to total
        hours, and sets the last workout date.

        Returns:
            Updated stats dictionary
        """
        ...

    def add_xp(self, user_id: str, xp: int) -> Dict[str, Any]:
        """
        Award experience points.

        Returns:
            Updated stats dictionary
        """
        ...
