"""
Challenge service.

Lists joinable challenges, joins users to them, and lists a user's
challenges newest first. Also stores challenges generated for a single
user and lets that user join them.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List
from uuid import uuid4

from application.exceptions import ChallengeNotFoundError
from application.ports import ChallengeRepository
from models.challenge import (
    Challenge,
    GeneratedChallenge,
    GeneratedChallengeCreate,
    UserChallenge,
)

logger = logging.getLogger(__name__)


class ChallengeService:
    """Service for challenge discovery and participation."""

    def __init__(
        self,
        challenge_repo: ChallengeRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._repo = challenge_repo
        self._clock = clock

    def list_available(self) -> List[Challenge]:
        return [Challenge.model_validate(c) for c in self._repo.list_active()]

    def join(self, user_id: str, challenge_id: str) -> UserChallenge:
        """
        Join a challenge.

        The end date is the start date plus the challenge duration in days.

        Raises:
            ChallengeNotFoundError: If the challenge does not exist
        """
        data = self._repo.get(challenge_id)
        if data is None:
            raise ChallengeNotFoundError(challenge_id)
        challenge = Challenge.model_validate(data)
        return self._enroll(user_id, challenge, challenge.model_dump(mode="json"))

    def list_for_user(self, user_id: str) -> List[UserChallenge]:
        challenges = [
            UserChallenge.model_validate(c)
            for c in self._repo.list_user_challenges(user_id)
        ]
        return sorted(challenges, key=lambda c: c.start_date, reverse=True)

    # -------------------------------------------------------------------------
    # Generated challenges
    # -------------------------------------------------------------------------

    def save_generated(
        self,
        user_id: str,
        challenges: List[GeneratedChallengeCreate],
    ) -> List[GeneratedChallenge]:
        """
        Store challenges generated for a user.

        Each one is active and stamped with the generation time. Challenges
        without an id get a new one.
        """
        now = self._clock()
        rows = [
            {
                **c.model_dump(mode="json"),
                "id": c.id or f"generated_{uuid4().hex[:12]}",
                "is_active": True,
                "is_ai": True,
                "generated_at": now,
                "created_at": now,
            }
            for c in challenges
        ]
        saved = self._repo.save_generated(user_id, rows)
        logger.info(f"Saved {len(saved)} generated challenges for user {user_id}")
        return [GeneratedChallenge.model_validate(c) for c in saved]

    def list_generated(self, user_id: str) -> List[GeneratedChallenge]:
        return [
            GeneratedChallenge.model_validate(c)
            for c in self._repo.list_generated(user_id)
        ]

    def join_generated(self, user_id: str, challenge_id: str) -> UserChallenge:
        """
        Join one of the user's generated challenges.

        Raises:
            ChallengeNotFoundError: If the user has no such generated challenge
        """
        data = self._repo.get_generated(user_id, challenge_id)
        if data is None:
            raise ChallengeNotFoundError(challenge_id)
        challenge = GeneratedChallenge.model_validate(data)
        snapshot = challenge.model_dump(mode="json", exclude={"user_id"})
        return self._enroll(user_id, challenge, snapshot)

    def _enroll(
        self,
        user_id: str,
        challenge: Challenge,
        snapshot: Dict[str, Any],
    ) -> UserChallenge:
        start = self._clock()
        created = self._repo.create_user_challenge({
            "user_id": user_id,
            "challenge_id": challenge.id,
            "challenge": snapshot,
            "start_date": start,
            "end_date": start + timedelta(days=challenge.duration),
            "current": 0,
            "progress": 0.0,
            "completed": False,
        })
        logger.info(f"User {user_id} joined challenge {challenge.id}")
        return UserChallenge.model_validate(created)
