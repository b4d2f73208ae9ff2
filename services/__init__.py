"""
Services package for fitcoach-api.

Contains business logic services for:
- Workout generation (catalog candidates + difficulty tables)
- Session playback (countdown/active timer state machine)
- Progress tracking (sessions, stats, challenge XP)
- User profiles
- Challenges and the saved workout library
- Coach chat (LLM with rule-based fallback)
"""

from services.challenge_service import ChallengeService
from services.coach_service import CoachService, analyze_performance, rule_based_advice
from services.profile_service import ProfileService
from services.progress_service import ProgressService, challenge_progress
from services.session_runner import (
    SessionPhase,
    SessionResult,
    SessionRunner,
    SessionState,
)
from services.ticker import AsyncioTicker, Ticker
from services.workout_generator import (
    QUICK_WORKOUT_PRESETS,
    CandidateFetchResult,
    Prescription,
    WorkoutGenerator,
    get_prescription,
    target_exercise_count,
)
from services.workout_library import WorkoutLibrary, clean_workout

__all__ = [
    # Challenges
    "ChallengeService",
    # Coach
    "CoachService",
    "analyze_performance",
    "rule_based_advice",
    # Profile
    "ProfileService",
    # Progress
    "ProgressService",
    "challenge_progress",
    # Session playback
    "AsyncioTicker",
    "SessionPhase",
    "SessionResult",
    "SessionRunner",
    "SessionState",
    "Ticker",
    # Generation
    "QUICK_WORKOUT_PRESETS",
    "CandidateFetchResult",
    "Prescription",
    "WorkoutGenerator",
    "get_prescription",
    "target_exercise_count",
    # Library
    "WorkoutLibrary",
    "clean_workout",
]
