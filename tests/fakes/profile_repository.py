"""Fake user profile repository for testing."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class FakeProfileRepository:
    """In-memory fake implementation of ProfileRepository."""

    def __init__(self):
        self._profiles: Dict[str, Dict[str, Any]] = {}

    def seed(self, profiles: List[Dict[str, Any]]) -> None:
        for profile in profiles:
            self._profiles[profile["user_id"]] = dict(profile)

    def reset(self) -> None:
        self._profiles.clear()

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        profile = self._profiles.get(user_id)
        return dict(profile) if profile else None

    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        profile = self._profiles.setdefault(user_id, {"user_id": user_id})
        profile.update(fields)
        profile["updated_at"] = datetime.now(timezone.utc)
        return dict(profile)

    def add_completed_challenge(self, user_id: str, challenge_id: str) -> Dict[str, Any]:
        completed = list(self._profiles.get(user_id, {}).get("completed_challenges", []))
        if challenge_id not in completed:
            completed.append(challenge_id)
        return self.upsert(user_id, {"completed_challenges": completed})
