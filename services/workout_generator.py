"""
Workout generator service.

Turns a set of WorkoutPreferences into a GeneratedWorkout:
1. Candidate Fetch - Up to 5 exercises per body part from the catalog
2. Equipment Filter - Case-insensitive substring match on equipment
3. De-duplication - By exercise id, first seen wins
4. Truncation - Exercise count from the duration step table
5. Prescription - Sets/reps/duration/rest from the difficulty tables

Naming is deterministic string templating; no LLM is involved here.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from application.exceptions import AllPresetsFailedError, EmptyCandidateSetError
from application.ports import ExerciseCatalog
from core.constants import CANDIDATES_PER_BODY_PART, DEFAULT_DIFFICULTY_BUCKET
from models.exercise import Exercise
from models.workout import (
    Difficulty,
    FitnessGoal,
    GeneratedWorkout,
    WorkoutExercise,
    WorkoutPreferences,
)

logger = logging.getLogger(__name__)


# Upper bound (minutes, inclusive) -> number of exercises
DURATION_STEPS: List[Tuple[int, int]] = [
    (15, 4),
    (25, 6),
    (35, 8),
]
MAX_EXERCISE_COUNT = 10

SETS_BY_DIFFICULTY: Dict[str, int] = {
    "beginner": 2,
    "intermediate": 3,
    "advanced": 4,
}

REPS_BY_DIFFICULTY: Dict[str, int] = {
    "beginner": 10,
    "intermediate": 15,
    "advanced": 20,
}

CARDIO_SECONDS_BY_DIFFICULTY: Dict[str, int] = {
    "beginner": 30,
    "intermediate": 45,
    "advanced": 60,
}

# Higher difficulty rests less
REST_SECONDS_BY_DIFFICULTY: Dict[str, int] = {
    "beginner": 60,
    "intermediate": 45,
    "advanced": 30,
}

GOAL_NAMES: Dict[FitnessGoal, str] = {
    FitnessGoal.WEIGHT_LOSS: "Fat Burn",
    FitnessGoal.MUSCLE_GAIN: "Muscle Builder",
    FitnessGoal.ENDURANCE: "Endurance",
    FitnessGoal.STRENGTH: "Strength",
}

QUICK_WORKOUT_PRESETS: Dict[str, WorkoutPreferences] = {
    "quick_beginner": WorkoutPreferences(
        duration=15,
        difficulty=Difficulty.BEGINNER,
        body_parts=["cardio", "chest"],
        equipment=[],
        fitness_goal=FitnessGoal.WEIGHT_LOSS,
    ),
    "quick_intermediate": WorkoutPreferences(
        duration=20,
        difficulty=Difficulty.INTERMEDIATE,
        body_parts=["upper legs", "back"],
        equipment=[],
        fitness_goal=FitnessGoal.ENDURANCE,
    ),
    "quick_advanced": WorkoutPreferences(
        duration=25,
        difficulty=Difficulty.ADVANCED,
        body_parts=["chest", "shoulders", "waist"],
        equipment=[],
        fitness_goal=FitnessGoal.STRENGTH,
    ),
}


@dataclass
class CandidateFetchResult:
    """Exercises fetched across body parts, with per-part failures."""

    exercises: List[Exercise] = field(default_factory=list)
    failed_body_parts: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_body_parts) and bool(self.exercises)


@dataclass(frozen=True)
class Prescription:
    """Prescribed load for one exercise."""

    sets: int
    reps: int
    duration: Optional[int]
    rest_time: int


def target_exercise_count(duration_minutes: int) -> int:
    """
    Number of exercises for a workout of the given length.

    Boundaries round down to the lower bucket: 15 minutes is 4, not 6.
    """
    for upper_bound, count in DURATION_STEPS:
        if duration_minutes <= upper_bound:
            return count
    return MAX_EXERCISE_COUNT


def _difficulty_bucket(difficulty: str) -> str:
    key = difficulty.strip().lower()
    if key not in SETS_BY_DIFFICULTY:
        return DEFAULT_DIFFICULTY_BUCKET
    return key


def get_prescription(exercise: Exercise, difficulty: str) -> Prescription:
    """
    Look up sets/reps/duration/rest for an exercise at a difficulty.

    Cardio exercises get a timed duration and zero reps; everything else
    gets reps and no duration. Unknown difficulty strings use the
    intermediate bucket.
    """
    bucket = _difficulty_bucket(difficulty)
    if exercise.is_cardio:
        return Prescription(
            sets=SETS_BY_DIFFICULTY[bucket],
            reps=0,
            duration=CARDIO_SECONDS_BY_DIFFICULTY[bucket],
            rest_time=REST_SECONDS_BY_DIFFICULTY[bucket],
        )
    return Prescription(
        sets=SETS_BY_DIFFICULTY[bucket],
        reps=REPS_BY_DIFFICULTY[bucket],
        duration=None,
        rest_time=REST_SECONDS_BY_DIFFICULTY[bucket],
    )


def filter_by_equipment(exercises: List[Exercise], equipment: List[str]) -> List[Exercise]:
    """Keep exercises whose equipment contains any requested token."""
    tokens = [eq.lower() for eq in equipment if eq]
    if not tokens:
        return list(exercises)
    return [
        ex for ex in exercises
        if any(token in ex.equipment.lower() for token in tokens)
    ]


def dedupe_exercises(exercises: List[Exercise]) -> List[Exercise]:
    """Drop repeated exercise ids, keeping first-seen order."""
    seen = set()
    unique = []
    for ex in exercises:
        if ex.id in seen:
            continue
        seen.add(ex.id)
        unique.append(ex)
    return unique


def generate_workout_name(preferences: WorkoutPreferences) -> str:
    """e.g. "Beginner Fat Burn - Chest" or "Advanced Strength - Full Body"."""
    if len(preferences.body_parts) == 1:
        part = preferences.body_parts[0]
        body_part_name = part[:1].upper() + part[1:]
    else:
        body_part_name = "Full Body"
    goal_name = GOAL_NAMES[preferences.fitness_goal]
    return f"{preferences.difficulty.value} {goal_name} - {body_part_name}"


def generate_workout_description(preferences: WorkoutPreferences) -> str:
    body_parts = " and ".join(preferences.body_parts)
    goal = preferences.fitness_goal.value.replace("_", " ")
    return (
        f"A {preferences.duration}-minute {preferences.difficulty.value.lower()} "
        f"workout targeting {body_parts} for {goal}."
    )


class WorkoutGenerator:
    """
    Service for generating workouts from user preferences.

    The catalog is injected so tests can substitute an in-memory fake.
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        candidates_per_body_part: int = CANDIDATES_PER_BODY_PART,
    ):
        """
        Initialize the workout generator.

        Args:
            catalog: Exercise catalog to draw candidates from
            candidates_per_body_part: Fetch cap per body part
        """
        self._catalog = catalog
        self._per_body_part = candidates_per_body_part

    async def fetch_candidates(self, body_parts: List[str]) -> CandidateFetchResult:
        """
        Fetch candidate exercises for each body part in order.

        A failure for one body part is recorded in the result and does not
        stop the others.
        """
        result = CandidateFetchResult()
        for body_part in body_parts:
            try:
                exercises = await self._catalog.get_exercises_by_body_part(
                    body_part, self._per_body_part
                )
            except Exception as e:
                logger.warning(f"Catalog fetch failed for body part '{body_part}': {e}")
                result.failed_body_parts.append(body_part)
                result.errors[body_part] = str(e)
                continue
            result.exercises.extend(exercises[: self._per_body_part])
        return result

    async def generate_workout(self, preferences: WorkoutPreferences) -> GeneratedWorkout:
        """
        Generate a workout for the given preferences.

        Args:
            preferences: Validated workout preferences

        Returns:
            Generated workout with exercises in presentation order

        Raises:
            EmptyCandidateSetError: If nothing survives fetch and filter
        """
        logger.info(
            f"Generating workout: duration={preferences.duration}m, "
            f"difficulty={preferences.difficulty.value}, "
            f"body_parts={preferences.body_parts}, equipment={preferences.equipment}"
        )

        fetched = await self.fetch_candidates(preferences.body_parts)
        if fetched.is_partial:
            logger.info(
                f"Proceeding with partial candidates; failed body parts: "
                f"{fetched.failed_body_parts}"
            )

        candidates = filter_by_equipment(fetched.exercises, preferences.equipment)
        candidates = dedupe_exercises(candidates)
        candidates = candidates[: target_exercise_count(preferences.duration)]

        if not candidates:
            raise EmptyCandidateSetError(
                body_parts=preferences.body_parts,
                equipment=preferences.equipment,
                failed_body_parts=fetched.failed_body_parts,
            )

        workout_exercises = []
        for exercise in candidates:
            prescription = get_prescription(exercise, preferences.difficulty.value)
            workout_exercises.append(
                WorkoutExercise(
                    exercise=exercise,
                    sets=prescription.sets,
                    reps=prescription.reps,
                    duration=prescription.duration,
                    rest_time=prescription.rest_time,
                )
            )

        workout = GeneratedWorkout(
            id=f"workout_{int(time.time() * 1000)}_{uuid4().hex[:6]}",
            name=generate_workout_name(preferences),
            description=generate_workout_description(preferences),
            duration=preferences.duration,
            difficulty=preferences.difficulty,
            body_parts=list(preferences.body_parts),
            category=", ".join(preferences.body_parts),
            exercises=workout_exercises,
        )
        logger.info(f"Generated workout {workout.id} with {len(workout_exercises)} exercises")
        return workout

    async def get_quick_workouts(self) -> List[GeneratedWorkout]:
        """
        Generate the fixed quick workout presets.

        Returns:
            Successful presets in preset order (1 to 3 workouts)

        Raises:
            AllPresetsFailedError: If every preset failed
        """
        workouts, errors = await self.generate_presets()
        if not workouts:
            raise AllPresetsFailedError(errors)
        return workouts

    async def generate_presets(self) -> Tuple[List[GeneratedWorkout], Dict[str, Exception]]:
        """Run every preset, collecting successes and per-preset errors."""
        workouts: List[GeneratedWorkout] = []
        errors: Dict[str, Exception] = {}
        for name, preferences in QUICK_WORKOUT_PRESETS.items():
            try:
                workouts.append(await self.generate_workout(preferences))
            except Exception as e:
                logger.warning(f"Quick workout preset '{name}' failed: {e}")
                errors[name] = e
        return workouts, errors
