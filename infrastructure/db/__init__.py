"""
Database infrastructure package.

Supabase-backed implementations of the repository ports in
application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseSessionRepository

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    session_repo = SupabaseSessionRepository(client)
"""

from infrastructure.db.challenge_repository import SupabaseChallengeRepository
from infrastructure.db.profile_repository import SupabaseProfileRepository
from infrastructure.db.saved_workout_repository import SupabaseSavedWorkoutRepository
from infrastructure.db.session_repository import SupabaseSessionRepository
from infrastructure.db.stats_repository import SupabaseStatsRepository

__all__ = [
    "SupabaseChallengeRepository",
    "SupabaseProfileRepository",
    "SupabaseSavedWorkoutRepository",
    "SupabaseSessionRepository",
    "SupabaseStatsRepository",
]
