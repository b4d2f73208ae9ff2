"""Unit tests for the saved workout library."""

from datetime import datetime, timedelta, timezone

import pytest

from models.session import SavedWorkoutCreate
from services.workout_library import WorkoutLibrary, clean_workout


@pytest.mark.unit
class TestCleanWorkout:
    def test_fills_defaults(self):
        cleaned = clean_workout(SavedWorkoutCreate(exercises=[{"exercise": {"id": "x1"}}]))

        assert cleaned["name"] == "Untitled Workout"
        assert cleaned["category"] == "general"
        assert cleaned["is_custom"] is False
        entry = cleaned["exercises"][0]
        assert entry["exercise"]["name"] == "Unknown Exercise"
        assert entry["exercise"]["equipment"] == "body weight"
        assert entry["exercise"]["difficulty"] == "Intermediate"
        assert entry["exercise"]["instructions"] == []
        assert (entry["sets"], entry["reps"], entry["duration"], entry["rest_time"]) == (3, 12, None, 60)

    def test_timed_entry_keeps_zero_reps(self):
        cleaned = clean_workout(
            SavedWorkoutCreate(name="Cardio", exercises=[{"exercise": {"id": "k1"}, "duration": 45}])
        )
        entry = cleaned["exercises"][0]
        assert entry["reps"] == 0
        assert entry["duration"] == 45

    def test_keeps_provided_values(self):
        cleaned = clean_workout(SavedWorkoutCreate(
            name="Push Day",
            category="strength",
            is_custom=True,
            exercises=[{
                "exercise": {"id": "c1", "name": "push-up", "instructions": ["Lower", "Press"]},
                "sets": 5,
                "reps": 8,
                "rest_time": 90,
            }],
        ))
        entry = cleaned["exercises"][0]
        assert cleaned["name"] == "Push Day"
        assert cleaned["is_custom"] is True
        assert entry["exercise"]["instructions"] == ["Lower", "Press"]
        assert (entry["sets"], entry["reps"], entry["rest_time"]) == (5, 8, 90)


@pytest.mark.unit
class TestWorkoutLibrary:
    def test_save_and_list(self, fake_saved_workout_repo, user_id):
        library = WorkoutLibrary(fake_saved_workout_repo)
        saved = library.save(user_id, SavedWorkoutCreate(name="Legs"))

        assert saved.user_id == user_id
        assert saved.name == "Legs"
        assert [w.id for w in library.list(user_id)] == [saved.id]

    def test_list_newest_first(self, fake_saved_workout_repo, user_id):
        now = datetime(2026, 3, 2, tzinfo=timezone.utc)
        fake_saved_workout_repo.seed([
            {"id": "old", "user_id": user_id, "name": "Old", "created_at": now - timedelta(days=2)},
            {"id": "new", "user_id": user_id, "name": "New", "created_at": now},
        ])
        library = WorkoutLibrary(fake_saved_workout_repo)
        assert [w.id for w in library.list(user_id)] == ["new", "old"]

    def test_delete_only_own(self, fake_saved_workout_repo, user_id, other_user_id):
        library = WorkoutLibrary(fake_saved_workout_repo)
        saved = library.save(user_id, SavedWorkoutCreate(name="Mine"))

        assert library.delete(other_user_id, saved.id) is False
        assert library.delete(user_id, saved.id) is True
        assert library.list(user_id) == []
