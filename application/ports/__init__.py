"""
Port interfaces (Protocols) for fitcoach-api.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory fakes
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.challenge_repository import ChallengeRepository
from application.ports.exercise_catalog import ExerciseCatalog
from application.ports.profile_repository import ProfileRepository
from application.ports.saved_workout_repository import SavedWorkoutRepository
from application.ports.session_repository import SessionRepository
from application.ports.stats_repository import StatsRepository

__all__ = [
    "ChallengeRepository",
    "ExerciseCatalog",
    "ProfileRepository",
    "SavedWorkoutRepository",
    "SessionRepository",
    "StatsRepository",
]
