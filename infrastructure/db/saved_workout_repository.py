"""
Supabase implementation of SavedWorkoutRepository.

Rows live in the saved_workouts table, scoped by user_id on every query.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from supabase import Client

from infrastructure.db._serialize import to_row


class SupabaseSavedWorkoutRepository:
    """Supabase-backed saved workout repository."""

    TABLE = "saved_workouts"

    def __init__(self, client: Client):
        self._client = client

    def add(self, user_id: str, workout: Dict[str, Any]) -> Dict[str, Any]:
        row = to_row({
            **workout,
            "user_id": user_id,
            "created_at": datetime.now(timezone.utc),
        })
        response = self._client.table(self.TABLE).insert(row).execute()
        return response.data[0]

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return response.data

    def delete(self, user_id: str, workout_id: str) -> bool:
        """
        Delete a saved workout owned by the user.

        Returns:
            True if a row was deleted
        """
        response = (
            self._client.table(self.TABLE)
            .delete()
            .eq("id", workout_id)
            .eq("user_id", user_id)
            .execute()
        )
        return len(response.data) > 0
