"""
Workouts router.

This router provides endpoints for:
- Generating a workout from preferences
- Quick workout presets
- A user's saved workout library
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import get_current_user, get_workout_generator, get_workout_library
from application.exceptions import EmptyCandidateSetError
from models.session import SavedWorkout, SavedWorkoutCreate
from models.workout import GeneratedWorkout, QuickWorkoutsResponse, WorkoutPreferences
from services.workout_generator import WorkoutGenerator
from services.workout_library import WorkoutLibrary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Generation
# =============================================================================


@router.post("/generate", response_model=GeneratedWorkout)
async def generate_workout(
    preferences: WorkoutPreferences,
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """
    Generate a workout from user preferences.

    Exercises are drawn from the catalog for each requested body part,
    filtered by equipment, de-duplicated and capped by duration. Sets,
    reps or time and rest come from the difficulty tables.

    Raises:
        HTTPException 404: If no exercises match the preferences
        HTTPException 500: If generation fails unexpectedly
    """
    try:
        return await generator.generate_workout(preferences)
    except EmptyCandidateSetError as e:
        logger.warning(f"Workout generation found no exercises: {e}")
        raise HTTPException(
            status_code=404,
            detail="No exercises found for the selected body parts and equipment",
        )
    except Exception as e:
        logger.exception(f"Unexpected error during workout generation: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during workout generation",
        )


@router.get("/quick", response_model=QuickWorkoutsResponse)
async def quick_workouts(
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """
    Generate the quick workout presets (beginner, intermediate, advanced).

    Presets that fail are listed in `failed_presets`.

    Raises:
        HTTPException 503: If every preset failed
    """
    workouts, errors = await generator.generate_presets()
    if not workouts:
        logger.error(f"All quick workout presets failed: {list(errors)}")
        raise HTTPException(
            status_code=503,
            detail="Quick workouts are unavailable right now. Please try again later.",
        )
    return QuickWorkoutsResponse(workouts=workouts, failed_presets=list(errors))


# =============================================================================
# Saved Workouts
# =============================================================================


@router.get("/saved", response_model=List[SavedWorkout])
def list_saved_workouts(
    user_id: str = Depends(get_current_user),
    library: WorkoutLibrary = Depends(get_workout_library),
):
    """List the user's saved workouts, newest first."""
    return library.list(user_id)


@router.post("/saved", response_model=SavedWorkout, status_code=status.HTTP_201_CREATED)
def save_workout(
    workout: SavedWorkoutCreate,
    user_id: str = Depends(get_current_user),
    library: WorkoutLibrary = Depends(get_workout_library),
):
    """Save a workout; missing fields are filled with defaults."""
    return library.save(user_id, workout)


@router.delete("/saved/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_saved_workout(
    workout_id: str,
    user_id: str = Depends(get_current_user),
    library: WorkoutLibrary = Depends(get_workout_library),
):
    if not library.delete(user_id, workout_id):
        raise HTTPException(status_code=404, detail=f"Saved workout {workout_id} not found")
