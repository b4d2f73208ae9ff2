"""
Integration tests for the workouts API.

Generation runs against FakeExerciseCatalog; saved workouts against
FakeSavedWorkoutRepository.
"""

import pytest


def _prefs(**overrides):
    data = {
        "duration": 15,
        "difficulty": "beginner",
        "body_parts": ["chest", "cardio"],
        "equipment": [],
        "fitness_goal": "weight_loss",
    }
    data.update(overrides)
    return data


@pytest.mark.integration
class TestGenerateWorkout:
    def test_generate(self, client):
        response = client.post("/workouts/generate", json=_prefs())

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Beginner Fat Burn - Full Body"
        assert data["difficulty"] == "Beginner"
        assert len(data["exercises"]) == 4
        first = data["exercises"][0]
        assert first["exercise"]["id"] == "c1"
        assert (first["sets"], first["reps"], first["duration"], first["rest_time"]) == (2, 10, None, 60)

    def test_cardio_entries_timed(self, client):
        response = client.post("/workouts/generate", json=_prefs(body_parts=["cardio"]))
        entries = response.json()["exercises"]
        assert all(e["reps"] == 0 and e["duration"] == 30 for e in entries)

    def test_invalid_difficulty_is_422(self, client):
        response = client.post("/workouts/generate", json=_prefs(difficulty="expert"))
        assert response.status_code == 422

    def test_missing_body_parts_is_422(self, client):
        response = client.post("/workouts/generate", json=_prefs(body_parts=[]))
        assert response.status_code == 422

    def test_no_matching_exercises_is_404(self, client):
        response = client.post("/workouts/generate", json=_prefs(equipment=["trap bar"]))
        assert response.status_code == 404

    def test_catalog_offline_is_404(self, client, fake_catalog):
        fake_catalog.go_offline()
        response = client.post("/workouts/generate", json=_prefs())
        assert response.status_code == 404


@pytest.mark.integration
class TestQuickWorkouts:
    def test_all_presets(self, client):
        response = client.get("/workouts/quick")

        assert response.status_code == 200
        data = response.json()
        assert [w["duration"] for w in data["workouts"]] == [15, 20, 25]
        assert data["failed_presets"] == []

    def test_failed_presets_listed(self, client, fake_catalog):
        fake_catalog.fail_for("chest", "back")
        response = client.get("/workouts/quick")

        data = response.json()
        assert response.status_code == 200
        assert [w["duration"] for w in data["workouts"]] == [15]
        assert data["failed_presets"] == ["quick_intermediate", "quick_advanced"]

    def test_all_presets_failed_is_503(self, client, fake_catalog):
        fake_catalog.go_offline()
        response = client.get("/workouts/quick")
        assert response.status_code == 503


@pytest.mark.integration
class TestSavedWorkouts:
    def test_save_list_delete(self, client, user_id):
        response = client.post("/workouts/saved", json={
            "name": "Push Day",
            "exercises": [{"exercise": {"id": "c1", "name": "push-up"}, "sets": 4}],
        })
        assert response.status_code == 201
        saved = response.json()
        assert saved["user_id"] == user_id
        assert saved["exercises"][0]["reps"] == 12

        listed = client.get("/workouts/saved").json()
        assert [w["id"] for w in listed] == [saved["id"]]

        assert client.delete(f"/workouts/saved/{saved['id']}").status_code == 204
        assert client.get("/workouts/saved").json() == []

    def test_delete_missing_is_404(self, client):
        assert client.delete("/workouts/saved/missing").status_code == 404
