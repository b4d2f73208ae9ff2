"""
Workout session runner.

Plays a GeneratedWorkout back as a state machine:

    NOT_STARTED -> COUNTDOWN -> ACTIVE <-> PAUSED -> COUNTDOWN ... -> COMPLETE

Every tick is one second. COUNTDOWN runs 3-2-1, then ACTIVE counts the
exercise time down. When ACTIVE reaches zero the runner moves to the next
set, then the next exercise, then COMPLETE. Skip jumps straight to the
next exercise. Pausing stops the ticker, so paused time is never counted.

The runner is single-threaded: ticks and user actions must run on the
same event loop.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from core.constants import COUNTDOWN_SECONDS, DEFAULT_EXERCISE_SECONDS
from models.workout import GeneratedWorkout, WorkoutExercise
from services.ticker import Ticker

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Observable phase of a running session."""

    NOT_STARTED = "not_started"
    COUNTDOWN = "countdown"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETE = "complete"


@dataclass
class SessionState:
    """Mutable runtime state. Never persisted."""

    exercise_index: int = 0
    current_set: int = 1
    countdown: int = COUNTDOWN_SECONDS
    exercise_time: int = DEFAULT_EXERCISE_SECONDS
    started: bool = False
    paused: bool = False
    completed: bool = False


@dataclass
class SessionResult:
    """What crosses the boundary when a session completes."""

    workout_id: str
    active_seconds: int
    exercises_total: int
    skipped_exercises: List[int] = field(default_factory=list)

    @property
    def active_minutes(self) -> float:
        return self.active_seconds / 60


TransitionListener = Callable[[SessionPhase, SessionPhase], None]
CompletionListener = Callable[[SessionResult], None]


def exercise_seconds(workout_exercise: WorkoutExercise) -> int:
    """Seconds per set; rep-based entries use the default."""
    return workout_exercise.duration or DEFAULT_EXERCISE_SECONDS


class SessionRunner:
    """
    State machine for one playthrough of a workout.

    Args:
        workout: The workout to play, or None if it failed to load
        ticker: Tick source driving the timers
        on_complete: Called exactly once on entering COMPLETE
        on_transition: Called with (previous, current) on every phase change
    """

    def __init__(
        self,
        workout: Optional[GeneratedWorkout],
        ticker: Ticker,
        on_complete: Optional[CompletionListener] = None,
        on_transition: Optional[TransitionListener] = None,
    ):
        self._workout = workout
        self._ticker = ticker
        self._on_complete = on_complete
        self._on_transition = on_transition
        self._state = SessionState()
        self._active_seconds = 0
        self._skipped: List[int] = []

        if self.is_loaded:
            self._state.exercise_time = exercise_seconds(workout.exercises[0])

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._workout is not None and bool(self._workout.exercises)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> SessionPhase:
        s = self._state
        if s.completed:
            return SessionPhase.COMPLETE
        if not s.started:
            return SessionPhase.NOT_STARTED
        if s.paused:
            return SessionPhase.PAUSED
        if s.countdown > 0:
            return SessionPhase.COUNTDOWN
        return SessionPhase.ACTIVE

    @property
    def current_exercise(self) -> Optional[WorkoutExercise]:
        if not self.is_loaded:
            return None
        return self._workout.exercises[self._state.exercise_index]

    @property
    def elapsed_active_seconds(self) -> int:
        return self._active_seconds

    @property
    def progress(self) -> float:
        """Fraction of exercises reached, for the overall progress bar."""
        if not self.is_loaded:
            return 0.0
        return (self._state.exercise_index + 1) / len(self._workout.exercises)

    # -------------------------------------------------------------------------
    # User actions
    # -------------------------------------------------------------------------

    def start(self) -> bool:
        """Begin the first countdown. Returns False if nothing to start."""
        if not self.is_loaded or self._state.started:
            return False
        previous = self.phase
        self._state.started = True
        self._state.countdown = COUNTDOWN_SECONDS
        self._ticker.start(self.tick)
        self._emit(previous)
        return True

    def pause(self) -> bool:
        if self.phase not in (SessionPhase.COUNTDOWN, SessionPhase.ACTIVE):
            return False
        previous = self.phase
        self._state.paused = True
        self._ticker.stop()
        self._emit(previous)
        return True

    def resume(self) -> bool:
        if self.phase != SessionPhase.PAUSED:
            return False
        previous = self.phase
        self._state.paused = False
        self._ticker.start(self.tick)
        self._emit(previous)
        return True

    def toggle_pause(self) -> bool:
        """Pause if running, resume if paused. Returns the new paused flag."""
        if self._state.paused:
            self.resume()
        else:
            self.pause()
        return self._state.paused

    def skip(self) -> bool:
        """
        Finish the current exercise now, ignoring remaining sets.

        Only while counting down or active. Returns False otherwise.
        """
        if self.phase not in (SessionPhase.COUNTDOWN, SessionPhase.ACTIVE):
            return False
        previous = self.phase
        self._skipped.append(self._state.exercise_index)
        logger.debug(f"Skipping exercise {self._state.exercise_index}")
        self._finish_exercise()
        self._emit(previous)
        return True

    def close(self) -> None:
        """Cancel pending ticks (the owning screen went away)."""
        self._ticker.stop()

    # -------------------------------------------------------------------------
    # Timer
    # -------------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the session by one second."""
        s = self._state
        if not s.started or s.paused or s.completed:
            return

        previous = self.phase
        if s.countdown > 0:
            s.countdown -= 1
        else:
            s.exercise_time -= 1
            self._active_seconds += 1
            if s.exercise_time <= 0:
                self._finish_set()
        self._emit(previous)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _finish_set(self) -> None:
        current = self.current_exercise
        if self._state.current_set < current.sets:
            self._state.current_set += 1
            self._state.exercise_time = exercise_seconds(current)
            self._state.countdown = COUNTDOWN_SECONDS
        else:
            self._finish_exercise()

    def _finish_exercise(self) -> None:
        s = self._state
        if s.exercise_index < len(self._workout.exercises) - 1:
            s.exercise_index += 1
            s.current_set = 1
            s.exercise_time = exercise_seconds(self._workout.exercises[s.exercise_index])
            s.countdown = COUNTDOWN_SECONDS
        else:
            self._complete()

    def _complete(self) -> None:
        self._state.completed = True
        self._ticker.stop()
        result = SessionResult(
            workout_id=self._workout.id,
            active_seconds=self._active_seconds,
            exercises_total=len(self._workout.exercises),
            skipped_exercises=list(self._skipped),
        )
        logger.info(
            f"Workout {result.workout_id} complete: {result.active_seconds}s active, "
            f"{len(result.skipped_exercises)} skipped"
        )
        if self._on_complete is not None:
            self._on_complete(result)

    def _emit(self, previous: SessionPhase) -> None:
        current = self.phase
        if current != previous and self._on_transition is not None:
            self._on_transition(previous, current)
