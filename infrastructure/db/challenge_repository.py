"""
Supabase implementation of ChallengeRepository.

Queries against:
- challenges: Shared challenge definitions
- user_challenges: Per-user progress, with a snapshot of the joined challenge
- generated_challenges: Challenges generated for a single user
"""

from typing import Any, Dict, List, Optional

from supabase import Client

from infrastructure.db._serialize import to_row


class SupabaseChallengeRepository:
    """Supabase-backed challenge repository."""

    def __init__(self, client: Client):
        self._client = client

    def list_active(self) -> List[Dict[str, Any]]:
        response = (
            self._client.table("challenges")
            .select("*")
            .eq("is_active", True)
            .execute()
        )
        return response.data

    def get(self, challenge_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("challenges")
            .select("*")
            .eq("id", challenge_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create_user_challenge(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = (
            self._client.table("user_challenges")
            .insert(to_row(data))
            .execute()
        )
        return response.data[0]

    def list_user_challenges(
        self,
        user_id: str,
        completed: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """
        List a user's challenges, newest first.

        Args:
            user_id: The user's ID
            completed: If set, only challenges with that completion state

        Returns:
            List of user challenge dictionaries
        """
        query = (
            self._client.table("user_challenges")
            .select("*")
            .eq("user_id", user_id)
        )
        if completed is not None:
            query = query.eq("completed", completed)
        response = query.order("start_date", desc=True).execute()
        return response.data

    def update_user_challenge(
        self,
        user_challenge_id: str,
        updates: Dict[str, Any],
    ) -> Dict[str, Any]:
        response = (
            self._client.table("user_challenges")
            .update(to_row(updates))
            .eq("id", user_challenge_id)
            .execute()
        )
        return response.data[0]

    def save_generated(
        self,
        user_id: str,
        challenges: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        if not challenges:
            return []
        rows = [to_row({**c, "user_id": user_id}) for c in challenges]
        response = (
            self._client.table("generated_challenges")
            .upsert(rows, on_conflict="user_id,id")
            .execute()
        )
        return response.data

    def list_generated(self, user_id: str) -> List[Dict[str, Any]]:
        response = (
            self._client.table("generated_challenges")
            .select("*")
            .eq("user_id", user_id)
            .eq("is_active", True)
            .order("generated_at", desc=True)
            .execute()
        )
        return response.data

    def get_generated(self, user_id: str, challenge_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("generated_challenges")
            .select("*")
            .eq("user_id", user_id)
            .eq("id", challenge_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
