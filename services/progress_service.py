"""
Workout progress service.

Persists the two boundaries of a session (start and completion) and
rolls completion into the user's aggregate stats and challenge progress:

- Session: marked complete with end time and active minutes
- Stats: total/weekly workouts, total hours, last workout date
- Challenges: every incomplete challenge advances by one workout;
  reaching the target completes it, awards its XP and records it on
  the user's profile
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from application.exceptions import SessionNotFoundError
from application.ports import (
    ChallengeRepository,
    ProfileRepository,
    SessionRepository,
    StatsRepository,
)
from models.challenge import UserChallenge
from models.session import UserStats, WorkoutSession
from models.workout import GeneratedWorkout
from services.session_runner import SessionResult, SessionRunner
from services.ticker import Ticker

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def challenge_progress(current: int, target: int) -> float:
    """Percent of a challenge done, capped at 100."""
    if target <= 0:
        return 100.0
    return min(current / target * 100, 100.0)


class ProgressService:
    """
    Service for session persistence, stats and challenge progress.

    Only ever called at session boundaries, never during timer ticks.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        stats_repo: StatsRepository,
        challenge_repo: ChallengeRepository,
        profile_repo: Optional[ProfileRepository] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize the progress service.

        Args:
            session_repo: Repository for workout sessions
            stats_repo: Repository for user stats
            challenge_repo: Repository for challenges and user challenges
            profile_repo: Repository for user profiles (completed challenges)
            clock: Source of "now" (UTC)
        """
        self._sessions = session_repo
        self._stats = stats_repo
        self._challenges = challenge_repo
        self._profiles = profile_repo
        self._clock = clock

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def start_session(self, user_id: str, workout: GeneratedWorkout) -> str:
        """
        Record the start of a session.

        Returns:
            The new session id
        """
        created = self._sessions.create(
            user_id=user_id,
            workout_id=workout.id,
            workout=workout.model_dump(mode="json"),
            start_time=self._clock(),
        )
        logger.info(f"Started session {created['id']} for user {user_id} (workout {workout.id})")
        return created["id"]

    def get_session(self, session_id: str) -> WorkoutSession:
        data = self._sessions.get(session_id)
        if data is None:
            raise SessionNotFoundError(session_id)
        return WorkoutSession.model_validate(data)

    def list_sessions(self, user_id: str) -> List[WorkoutSession]:
        """A user's session history, most recently started first."""
        return [WorkoutSession.model_validate(s) for s in self._sessions.list_for_user(user_id)]

    def complete_session(self, session_id: str, duration_minutes: float) -> WorkoutSession:
        """
        Complete a session and roll it into stats and challenges.

        Completing an already-completed session returns it unchanged.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = self.get_session(session_id)
        if session.completed:
            logger.warning(f"Session {session_id} already completed; ignoring")
            return session

        now = self._clock()
        updated = self._sessions.mark_completed(session_id, now, duration_minutes)
        if updated is None:
            raise SessionNotFoundError(session_id)

        self._ensure_stats(session.user_id)
        self._stats.record_workout(session.user_id, duration_minutes, now)
        self.update_challenge_progress(session.user_id)

        logger.info(f"Completed session {session_id}: {duration_minutes:.1f} min")
        return WorkoutSession.model_validate(updated)

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------

    def get_stats(self, user_id: str) -> UserStats:
        """Get a user's stats, creating defaults on first access."""
        return UserStats.model_validate(self._ensure_stats(user_id))

    def _ensure_stats(self, user_id: str) -> dict:
        stats = self._stats.get(user_id)
        if stats is None:
            stats = self._stats.create(user_id)
        return stats

    # -------------------------------------------------------------------------
    # Challenges
    # -------------------------------------------------------------------------

    def update_challenge_progress(self, user_id: str) -> List[UserChallenge]:
        """
        Advance every incomplete challenge by one workout.

        Errors are logged and not raised: the session is already recorded.

        Returns:
            The challenges that were updated
        """
        updated: List[UserChallenge] = []
        try:
            open_challenges = self._challenges.list_user_challenges(user_id, completed=False)
            for data in open_challenges:
                user_challenge = UserChallenge.model_validate(data)
                current = user_challenge.current + 1
                target = user_challenge.challenge.target
                updates = {
                    "current": current,
                    "progress": challenge_progress(current, target),
                }
                completed = current >= target
                if completed:
                    updates["completed"] = True
                    updates["completed_at"] = self._clock()

                # Challenge is marked complete before XP is awarded
                result = self._challenges.update_user_challenge(user_challenge.id, updates)
                updated.append(UserChallenge.model_validate(result))

                if completed:
                    xp = user_challenge.challenge.xp_reward
                    self._stats.add_xp(user_id, xp)
                    if self._profiles is not None:
                        self._profiles.add_completed_challenge(
                            user_id, user_challenge.challenge_id
                        )
                    logger.info(
                        f"User {user_id} completed challenge "
                        f"{user_challenge.challenge_id} (+{xp} XP)"
                    )
        except Exception as e:
            logger.error(f"Error updating challenge progress for user {user_id}: {e}")
        return updated

    # -------------------------------------------------------------------------
    # Runner wiring
    # -------------------------------------------------------------------------

    def build_session_runner(
        self,
        user_id: str,
        workout: GeneratedWorkout,
        ticker: Ticker,
        on_finished: Optional[Callable[[Optional[WorkoutSession]], None]] = None,
    ) -> Tuple[str, SessionRunner]:
        """
        Start a persisted session and return a runner bound to it.

        When the runner completes, the session is completed with the
        active minutes the runner measured, then `on_finished` is called
        (e.g. to navigate to a results screen). `on_finished` always runs;
        it receives None if saving the completed session failed.
        """
        session_id = self.start_session(user_id, workout)

        def handle_complete(result: SessionResult) -> None:
            session: Optional[WorkoutSession] = None
            try:
                session = self.complete_session(session_id, result.active_minutes)
            except Exception:
                logger.exception(f"Failed to save completed session {session_id}")
            if on_finished is not None:
                on_finished(session)

        return session_id, SessionRunner(workout, ticker, on_complete=handle_complete)
