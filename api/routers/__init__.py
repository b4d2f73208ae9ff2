"""
Router package for FitCoach API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- workouts: Workout generation, quick presets and saved workouts
- exercises: Exercise catalog browsing
- sessions: Workout session start, completion and history
- stats: User workout stats
- profile: User profile and completed challenges
- challenges: Challenge discovery and participation
- coach: Coach chat and workout insights
"""

from api.routers.challenges import router as challenges_router
from api.routers.coach import router as coach_router
from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.profile import router as profile_router
from api.routers.sessions import router as sessions_router
from api.routers.stats import router as stats_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "challenges_router",
    "coach_router",
    "exercises_router",
    "health_router",
    "profile_router",
    "sessions_router",
    "stats_router",
    "workouts_router",
]
