"""
API package for FitCoach API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

from api.deps import (
    get_current_user,
    get_exercise_catalog,
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
)

__all__ = [
    "get_current_user",
    "get_exercise_catalog",
    "get_settings",
    "get_supabase_client",
    "get_supabase_client_required",
]
