"""
Supabase implementation of StatsRepository.

One row per user in the user_stats table, keyed by user_id.
Counter updates read the current row and write the new totals back.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import Client

from infrastructure.db._serialize import to_row


class SupabaseStatsRepository:
    """Supabase-backed user stats repository."""

    TABLE = "user_stats"

    def __init__(self, client: Client):
        self._client = client

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create(self, user_id: str) -> Dict[str, Any]:
        """
        Create default stats for a user.

        Args:
            user_id: The user's ID

        Returns:
            Created stats dictionary
        """
        now = datetime.now(timezone.utc)
        row = to_row({
            "user_id": user_id,
            "total_workouts": 0,
            "weekly_workouts": 0,
            "total_hours": 0.0,
            "current_level": 1,
            "total_xp": 0,
            "created_at": now,
            "updated_at": now,
        })
        response = self._client.table(self.TABLE).insert(row).execute()
        return response.data[0]

    def _update(self, user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        updates = {**updates, "updated_at": datetime.now(timezone.utc)}
        response = (
            self._client.table(self.TABLE)
            .update(to_row(updates))
            .eq("user_id", user_id)
            .execute()
        )
        return response.data[0]

    def _require(self, user_id: str) -> Dict[str, Any]:
        return self.get(user_id) or self.create(user_id)

    def record_workout(
        self,
        user_id: str,
        duration_minutes: float,
        completed_at: datetime,
    ) -> Dict[str, Any]:
        """
        Add one completed workout to the user's counters.

        Args:
            user_id: The user's ID
            duration_minutes: Active minutes of the workout
            completed_at: When the workout finished

        Returns:
            Updated stats dictionary
        """
        stats = self._require(user_id)
        return self._update(user_id, {
            "total_workouts": (stats.get("total_workouts") or 0) + 1,
            "weekly_workouts": (stats.get("weekly_workouts") or 0) + 1,
            "total_hours": (stats.get("total_hours") or 0.0) + duration_minutes / 60,
            "last_workout_date": completed_at,
        })

    def add_xp(self, user_id: str, xp: int) -> Dict[str, Any]:
        stats = self._require(user_id)
        return self._update(user_id, {"total_xp": (stats.get("total_xp") or 0) + xp})
