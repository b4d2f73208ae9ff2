"""Unit tests for request/response models and derived exercise fields."""

import pytest
from pydantic import ValidationError

from core.constants import MAX_CHAT_HISTORY
from models.coach import ChatRequest
from models.exercise import Exercise, derive_difficulty
from models.workout import Difficulty, WorkoutExercise, WorkoutPreferences
from tests.fakes import make_exercise


@pytest.mark.unit
class TestDeriveDifficulty:
    @pytest.mark.parametrize(
        "equipment,expected",
        [
            ("body weight", "Beginner"),
            ("Assisted", "Beginner"),
            ("dumbbell", "Beginner"),
            ("kettlebell", "Beginner"),
            ("resistance band", "Beginner"),
            ("barbell", "Intermediate"),
            ("cable", "Intermediate"),
            ("smith machine", "Intermediate"),
            ("trap bar", "Advanced"),
            # Contains "barbell", which the intermediate list matches first
            ("olympic barbell", "Intermediate"),
            ("stability ball", "Intermediate"),
            ("", "Intermediate"),
        ],
    )
    def test_equipment_table(self, equipment, expected):
        assert derive_difficulty(equipment) == expected

    def test_body_weight_is_exact_match(self):
        # Only an exact "body weight" counts as body weight
        assert derive_difficulty("body weight vest") == "Intermediate"


@pytest.mark.unit
class TestExerciseFromCatalog:
    def test_missing_optional_fields(self):
        ex = Exercise.from_catalog({
            "id": 42,
            "name": "run",
            "bodyPart": "cardio",
            "target": "cardiovascular system",
            "equipment": "body weight",
        })
        assert ex.id == "42"
        assert ex.instructions == []
        assert ex.secondary_muscles == []
        assert ex.is_cardio is True

    def test_cardio_detection_is_case_insensitive(self):
        assert make_exercise("1", "Cardio").is_cardio is True
        assert make_exercise("2", "chest").is_cardio is False


@pytest.mark.unit
class TestWorkoutPreferences:
    def _data(self, **overrides):
        data = {
            "duration": 20,
            "difficulty": "beginner",
            "body_parts": ["chest"],
            "fitness_goal": "strength",
        }
        data.update(overrides)
        return data

    def test_difficulty_case_insensitive(self):
        assert WorkoutPreferences(**self._data(difficulty="ADVANCED")).difficulty == Difficulty.ADVANCED

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutPreferences(**self._data(difficulty="expert"))

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            WorkoutPreferences(**self._data(duration=0))

    def test_body_parts_required(self):
        with pytest.raises(ValidationError):
            WorkoutPreferences(**self._data(body_parts=[]))

    def test_blank_body_parts_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutPreferences(**self._data(body_parts=["  ", ""]))

    def test_body_parts_stripped(self):
        prefs = WorkoutPreferences(**self._data(body_parts=[" chest ", "", "back"]))
        assert prefs.body_parts == ["chest", "back"]

    def test_equipment_defaults_empty(self):
        assert WorkoutPreferences(**self._data()).equipment == []


@pytest.mark.unit
class TestWorkoutExercise:
    def test_reps_entry(self):
        entry = WorkoutExercise(exercise=make_exercise("1"), sets=3, reps=12, rest_time=45)
        assert entry.duration is None

    def test_timed_entry(self):
        entry = WorkoutExercise(
            exercise=make_exercise("1", "cardio"), sets=2, reps=0, duration=30, rest_time=60
        )
        assert entry.reps == 0

    def test_both_metrics_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutExercise(exercise=make_exercise("1"), sets=3, reps=10, duration=30, rest_time=45)

    def test_neither_metric_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutExercise(exercise=make_exercise("1"), sets=3, reps=0, rest_time=45)

    def test_frozen(self):
        entry = WorkoutExercise(exercise=make_exercise("1"), sets=3, reps=12, rest_time=45)
        with pytest.raises(ValidationError):
            entry.sets = 5


@pytest.mark.unit
class TestChatRequest:
    def test_message_sanitized(self):
        request = ChatRequest(message="  how\n\tdo I   start?  ")
        assert request.message == "how do I start?"

    def test_blank_message_rejected(self):
        with pytest.raises(ValidationError):
            ChatRequest(message=" \n ")

    def test_history_trimmed(self):
        history = [{"role": "user", "content": f"msg {i}"} for i in range(MAX_CHAT_HISTORY + 5)]
        request = ChatRequest(message="hi", history=history)
        assert len(request.history) == MAX_CHAT_HISTORY
        assert request.history[0].content == "msg 5"
