"""
Saved workout library.

Cleans incoming workouts before they are stored: missing names, exercise
fields and prescriptions are filled with defaults so the stored document
is always complete.
"""

import logging
from typing import Any, Dict, List

from application.ports import SavedWorkoutRepository
from models.session import SavedWorkout, SavedWorkoutCreate

logger = logging.getLogger(__name__)


def _clean_exercise(entry: Dict[str, Any]) -> Dict[str, Any]:
    exercise = entry.get("exercise") or {}
    instructions = exercise.get("instructions")
    secondary = exercise.get("secondary_muscles")
    duration = entry.get("duration") or None
    return {
        "exercise": {
            "id": exercise.get("id") or "",
            "name": exercise.get("name") or "Unknown Exercise",
            "body_part": exercise.get("body_part") or "general",
            "target": exercise.get("target") or "general",
            "equipment": exercise.get("equipment") or "body weight",
            "gif_url": exercise.get("gif_url") or "",
            "instructions": instructions if isinstance(instructions, list) else [],
            "secondary_muscles": secondary if isinstance(secondary, list) else [],
            "difficulty": exercise.get("difficulty") or "Intermediate",
            "category": exercise.get("category") or "general",
            "description": exercise.get("description") or "",
        },
        "sets": entry.get("sets") or 3,
        # Timed entries keep zero reps
        "reps": entry.get("reps") or (0 if duration else 12),
        "duration": duration,
        "rest_time": entry.get("rest_time") or 60,
    }


def clean_workout(workout: SavedWorkoutCreate) -> Dict[str, Any]:
    """Fill defaults for every field of a workout about to be saved."""
    return {
        "name": workout.name or "Untitled Workout",
        "exercises": [_clean_exercise(e) for e in workout.exercises],
        "is_custom": workout.is_custom,
        "category": workout.category or "general",
    }


class WorkoutLibrary:
    """Service for a user's saved workouts."""

    def __init__(self, repo: SavedWorkoutRepository):
        self._repo = repo

    def save(self, user_id: str, workout: SavedWorkoutCreate) -> SavedWorkout:
        created = self._repo.add(user_id, clean_workout(workout))
        logger.info(f"Saved workout {created['id']} for user {user_id}")
        return SavedWorkout.model_validate(created)

    def list(self, user_id: str) -> List[SavedWorkout]:
        workouts = [SavedWorkout.model_validate(w) for w in self._repo.list_for_user(user_id)]
        return sorted(workouts, key=lambda w: w.created_at, reverse=True)

    def delete(self, user_id: str, workout_id: str) -> bool:
        return self._repo.delete(user_id, workout_id)
