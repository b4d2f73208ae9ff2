"""Models package for fitcoach-api."""

from models.challenge import (
    Challenge,
    ChallengeType,
    GeneratedChallenge,
    GeneratedChallengeCreate,
    UserChallenge,
)
from models.coach import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    InsightsResponse,
    PerformanceSummary,
)
from models.exercise import Exercise, derive_difficulty
from models.profile import UserProfile, UserProfileUpdate
from models.session import (
    CompleteSessionRequest,
    SavedExercise,
    SavedWorkout,
    SavedWorkoutCreate,
    StartSessionRequest,
    StartSessionResponse,
    UserStats,
    WorkoutSession,
)
from models.workout import (
    Difficulty,
    FitnessGoal,
    GeneratedWorkout,
    QuickWorkoutsResponse,
    WorkoutExercise,
    WorkoutPreferences,
)

__all__ = [
    "Challenge",
    "ChallengeType",
    "GeneratedChallenge",
    "GeneratedChallengeCreate",
    "UserChallenge",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "InsightsResponse",
    "PerformanceSummary",
    "Exercise",
    "derive_difficulty",
    "UserProfile",
    "UserProfileUpdate",
    "CompleteSessionRequest",
    "SavedExercise",
    "SavedWorkout",
    "SavedWorkoutCreate",
    "StartSessionRequest",
    "StartSessionResponse",
    "UserStats",
    "WorkoutSession",
    "Difficulty",
    "FitnessGoal",
    "GeneratedWorkout",
    "QuickWorkoutsResponse",
    "WorkoutExercise",
    "WorkoutPreferences",
]
