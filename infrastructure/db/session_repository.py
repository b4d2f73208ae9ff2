"""
Supabase implementation of SessionRepository.

Rows live in the workout_sessions table. A row is inserted when a
session starts and updated exactly once when it completes.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from supabase import Client

from infrastructure.db._serialize import to_row


class SupabaseSessionRepository:
    """Supabase-backed workout session repository."""

    TABLE = "workout_sessions"

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create(
        self,
        user_id: str,
        workout_id: str,
        workout: Dict[str, Any],
        start_time: datetime,
    ) -> Dict[str, Any]:
        row = to_row({
            "user_id": user_id,
            "workout_id": workout_id,
            "workout": workout,
            "start_time": start_time,
            "completed": False,
        })
        response = self._client.table(self.TABLE).insert(row).execute()
        return response.data[0]

    def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def mark_completed(
        self,
        session_id: str,
        end_time: datetime,
        duration_minutes: float,
    ) -> Optional[Dict[str, Any]]:
        """
        Mark a session complete.

        Args:
            session_id: The session's ID
            end_time: When the session finished
            duration_minutes: Active minutes measured by the runner

        Returns:
            Updated session dictionary, None if no row matched
        """
        response = (
            self._client.table(self.TABLE)
            .update(to_row({
                "end_time": end_time,
                "duration": duration_minutes,
                "completed": True,
            }))
            .eq("id", session_id)
            .execute()
        )
        return response.data[0] if response.data else None

    def list_open(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("completed", False)
            .order("start_time", desc=True)
            .execute()
        )
        return response.data

    def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("start_time", desc=True)
            .execute()
        )
        return response.data
