"""
Session, stats and saved-workout models.

A session only crosses the service boundary at its two ends: when it
starts (snapshot of the workout) and when it completes (duration).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from models.exercise import Exercise
from models.workout import GeneratedWorkout


class WorkoutSession(BaseModel):
    """A single playthrough of a workout."""

    id: str
    user_id: str
    workout_id: str
    workout: Dict[str, Any] = Field(default_factory=dict)
    start_time: datetime
    end_time: Optional[datetime] = None
    completed: bool = False
    duration: Optional[float] = Field(None, description="Minutes")


class StartSessionRequest(BaseModel):
    """Request model for starting a session."""

    workout: GeneratedWorkout


class StartSessionResponse(BaseModel):
    """Response model for a started session."""

    session_id: str


class CompleteSessionRequest(BaseModel):
    """Request model for completing a session."""

    duration_minutes: float = Field(ge=0, description="Active minutes in the session")


class UserStats(BaseModel):
    """Aggregate workout statistics for a user."""

    user_id: str
    total_workouts: int = 0
    weekly_workouts: int = 0
    total_hours: float = 0.0
    current_level: int = 1
    total_xp: int = 0
    last_workout_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class SavedExercise(BaseModel):
    """An exercise entry inside a saved workout."""

    exercise: Exercise
    sets: int = 3
    reps: int = 12
    duration: Optional[int] = None
    rest_time: int = 60


class SavedWorkoutCreate(BaseModel):
    """Request model for saving a workout to a user's library."""

    name: Optional[str] = None
    exercises: List[Dict[str, Any]] = Field(default_factory=list)
    is_custom: bool = False
    category: Optional[str] = None


class SavedWorkout(BaseModel):
    """A workout stored in a user's library."""

    id: str
    user_id: str
    name: str
    exercises: List[SavedExercise] = Field(default_factory=list)
    is_custom: bool = False
    category: str = "general"
    created_at: datetime
    last_used: Optional[datetime] = None
