"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Routers translate them into HTTP responses.
"""

from typing import Dict, List, Optional


class WorkoutEngineError(Exception):
    """Base error for workout generation."""

    pass


class EmptyCandidateSetError(WorkoutEngineError):
    """No exercises remain for the requested body parts and equipment.

    Raised after fetching and filtering. No partial or placeholder
    workout is produced.
    """

    def __init__(
        self,
        body_parts: List[str],
        equipment: Optional[List[str]] = None,
        failed_body_parts: Optional[List[str]] = None,
    ):
        self.body_parts = list(body_parts)
        self.equipment = list(equipment or [])
        self.failed_body_parts = list(failed_body_parts or [])
        message = f"No exercises found for body parts {self.body_parts}"
        if self.equipment:
            message += f" with equipment {self.equipment}"
        if self.failed_body_parts:
            message += f" (catalog unavailable for {self.failed_body_parts})"
        super().__init__(message)


class AllPresetsFailedError(WorkoutEngineError):
    """Every quick workout preset failed to generate."""

    def __init__(self, errors: Dict[str, Exception]):
        self.errors = dict(errors)
        super().__init__(
            f"All {len(self.errors)} quick workout presets failed: "
            + "; ".join(f"{name}: {err}" for name, err in self.errors.items())
        )


class ExerciseCatalogError(Exception):
    """Base error for the exercise catalog."""

    pass


class CatalogOfflineError(ExerciseCatalogError):
    """Catalog is unreachable, rate limited, or rejecting requests."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ExerciseNotFoundError(ExerciseCatalogError):
    """A single exercise lookup found nothing."""

    def __init__(self, exercise_id: str):
        super().__init__(f"Exercise {exercise_id} not found")
        self.exercise_id = exercise_id


class SessionNotFoundError(Exception):
    """Workout session does not exist."""

    def __init__(self, session_id: str):
        super().__init__(f"Workout session {session_id} not found")
        self.session_id = session_id


class ChallengeNotFoundError(Exception):
    """Challenge does not exist."""

    def __init__(self, challenge_id: str):
        super().__init__(f"Challenge {challenge_id} not found")
        self.challenge_id = challenge_id


class ProfileNotFoundError(Exception):
    """User has no saved profile."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile for user {user_id} not found")
        self.user_id = user_id
