"""
Workout generation models.

WorkoutPreferences is the generator input; GeneratedWorkout is its
immutable output, consumed exercise by exercise by the session runner.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.exercise import Exercise


class Difficulty(str, Enum):
    """Workout difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class FitnessGoal(str, Enum):
    """User fitness goals."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    STRENGTH = "strength"


class WorkoutPreferences(BaseModel):
    """Preferences that drive workout generation."""

    duration: int = Field(gt=0, description="Total workout duration in minutes")
    difficulty: Difficulty = Field(description="Requested difficulty level")
    body_parts: List[str] = Field(
        min_length=1,
        description="Catalog body parts to draw exercises from",
    )
    equipment: List[str] = Field(
        default_factory=list,
        description="Acceptable equipment; empty means no filter",
    )
    fitness_goal: FitnessGoal = Field(description="Primary fitness goal")

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, v: Any) -> Any:
        """Accept difficulty in any letter case ("advanced", "ADVANCED")."""
        if isinstance(v, str):
            for level in Difficulty:
                if level.value.lower() == v.strip().lower():
                    return level
        return v

    @field_validator("body_parts")
    @classmethod
    def strip_body_parts(cls, v: List[str]) -> List[str]:
        """Drop blank body parts; at least one must remain."""
        cleaned = [part.strip() for part in v if part and part.strip()]
        if not cleaned:
            raise ValueError("At least one body part is required")
        return cleaned


class WorkoutExercise(BaseModel):
    """An exercise with its prescription inside a workout."""

    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    sets: int = Field(ge=1)
    reps: int = Field(ge=0)
    duration: Optional[int] = Field(
        None, gt=0, description="Seconds per set, present only for timed entries"
    )
    rest_time: int = Field(ge=0, description="Rest after each set in seconds")

    @model_validator(mode="after")
    def check_primary_metric(self) -> "WorkoutExercise":
        """Exactly one of reps or duration is the target metric."""
        has_reps = self.reps > 0
        has_duration = self.duration is not None
        if has_reps == has_duration:
            raise ValueError("Exactly one of reps > 0 or duration must be set")
        return self


class GeneratedWorkout(BaseModel):
    """A concrete, ordered workout produced by the generator."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    duration: int
    difficulty: Difficulty
    body_parts: List[str]
    category: str
    exercises: List[WorkoutExercise]


class QuickWorkoutsResponse(BaseModel):
    """Response model for quick workout presets."""

    workouts: List[GeneratedWorkout]
    failed_presets: List[str] = Field(default_factory=list)
