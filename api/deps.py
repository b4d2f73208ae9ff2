"""
FastAPI Dependency Providers for FitCoach API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request
- Auth provider resolves the user from a Supabase access token

Usage in routers:
    from api.deps import get_progress_service, get_current_user

    @router.get("/stats/me")
    def my_stats(
        user_id: str = Depends(get_current_user),
        progress: ProgressService = Depends(get_progress_service),
    ):
        return progress.get_stats(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_catalog] = lambda: FakeExerciseCatalog()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.ports import (
    ChallengeRepository,
    ExerciseCatalog,
    ProfileRepository,
    SavedWorkoutRepository,
    SessionRepository,
    StatsRepository,
)
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import (
    SupabaseChallengeRepository,
    SupabaseProfileRepository,
    SupabaseSavedWorkoutRepository,
    SupabaseSessionRepository,
    SupabaseStatsRepository,
)
from infrastructure.exercisedb_client import ExerciseDBClient
from services.challenge_service import ChallengeService
from services.coach_service import CoachService
from services.profile_service import ProfileService
from services.progress_service import ProgressService
from services.workout_generator import WorkoutGenerator
from services.workout_library import WorkoutLibrary

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_session_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SessionRepository:
    return SupabaseSessionRepository(client)


def get_stats_repo(
    client: Client = Depends(get_supabase_client_required),
) -> StatsRepository:
    return SupabaseStatsRepository(client)


def get_challenge_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ChallengeRepository:
    return SupabaseChallengeRepository(client)


def get_saved_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SavedWorkoutRepository:
    return SupabaseSavedWorkoutRepository(client)


def get_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProfileRepository:
    return SupabaseProfileRepository(client)


# =============================================================================
# Exercise Catalog Provider
# =============================================================================


def get_exercise_catalog(
    settings: Settings = Depends(get_settings),
) -> ExerciseCatalog:
    """
    Get the exercise catalog.

    Returns an ExerciseDBClient configured from settings.
    The return type is the Protocol to enable easy mocking.
    """
    return ExerciseDBClient(
        base_url=settings.exercisedb_base_url,
        api_key=settings.exercisedb_api_key,
        timeout=settings.exercisedb_timeout,
    )


# =============================================================================
# Service Providers
# =============================================================================


def get_workout_generator(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> WorkoutGenerator:
    return WorkoutGenerator(catalog)


def get_progress_service(
    session_repo: SessionRepository = Depends(get_session_repo),
    stats_repo: StatsRepository = Depends(get_stats_repo),
    challenge_repo: ChallengeRepository = Depends(get_challenge_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> ProgressService:
    return ProgressService(session_repo, stats_repo, challenge_repo, profile_repo)


def get_challenge_service(
    challenge_repo: ChallengeRepository = Depends(get_challenge_repo),
) -> ChallengeService:
    return ChallengeService(challenge_repo)


def get_workout_library(
    repo: SavedWorkoutRepository = Depends(get_saved_workout_repo),
) -> WorkoutLibrary:
    return WorkoutLibrary(repo)


def get_profile_service(
    repo: ProfileRepository = Depends(get_profile_repo),
) -> ProfileService:
    return ProfileService(repo)


def get_coach_service(
    settings: Settings = Depends(get_settings),
) -> CoachService:
    """
    Get the coach service.

    Without an OpenAI key the coach answers from its rules only.
    """
    return CoachService(api_key=settings.openai_api_key, model=settings.openai_model)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    client: Client = Depends(get_supabase_client_required),
) -> str:
    """
    Get the current authenticated user ID.

    Validates the Supabase access token from the Authorization header.

    Args:
        authorization: Bearer token header
        client: Supabase client (injected)

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header",
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format",
        )

    token = authorization[7:]  # Remove "Bearer " prefix
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
        )

    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Token validation failed: {e}")
        raise HTTPException(status_code=401, detail="Invalid token") from e

    if response is None or response.user is None:
        raise HTTPException(status_code=401, detail="Invalid token")

    return response.user.id


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_challenge_repo",
    "get_saved_workout_repo",
    "get_session_repo",
    "get_stats_repo",
    # Catalog
    "get_exercise_catalog",
    # Services
    "get_challenge_service",
    "get_coach_service",
    "get_progress_service",
    "get_workout_generator",
    "get_workout_library",
    # Authentication
    "get_current_user",
]
