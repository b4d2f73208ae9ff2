"""
Supabase implementation of ProfileRepository.

One row per user in the user_profiles table, keyed by user_id.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import Client

from infrastructure.db._serialize import to_row


class SupabaseProfileRepository:
    """Supabase-backed user profile repository."""

    TABLE = "user_profiles"

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

    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create the profile or merge fields into the existing row.

        Columns not in `fields` keep their stored values.
        """
        row = to_row({
            **fields,
            "user_id": user_id,
            "updated_at": datetime.now(timezone.utc),
        })
        response = (
            self._client.table(self.TABLE)
            .upsert(row, on_conflict="user_id")
            .execute()
        )
        return response.data[0]

    def add_completed_challenge(self, user_id: str, challenge_id: str) -> Dict[str, Any]:
        profile = self.get(user_id) or {}
        completed = list(profile.get("completed_challenges") or [])
        if challenge_id not in completed:
            completed.append(challenge_id)
        return self.upsert(user_id, {"completed_challenges": completed})
