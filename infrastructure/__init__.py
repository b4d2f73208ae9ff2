"""
Infrastructure layer package for fitcoach-api.

Concrete implementations of the port interfaces:
- db/: Supabase repositories
- exercisedb_client: ExerciseDB catalog over HTTP
"""

from infrastructure.db import (
    SupabaseChallengeRepository,
    SupabaseProfileRepository,
    SupabaseSavedWorkoutRepository,
    SupabaseSessionRepository,
    SupabaseStatsRepository,
)
from infrastructure.exercisedb_client import ExerciseDBClient

__all__ = [
    "ExerciseDBClient",
    "SupabaseChallengeRepository",
    "SupabaseProfileRepository",
    "SupabaseSavedWorkoutRepository",
    "SupabaseSessionRepository",
    "SupabaseStatsRepository",
]
