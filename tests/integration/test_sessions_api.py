"""
Integration tests for sessions and stats APIs.

A session is started with a generated workout and completed with the
active minutes measured on the client.
"""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def workout(client):
    response = client.post("/workouts/generate", json={
        "duration": 15,
        "difficulty": "Intermediate",
        "body_parts": ["chest"],
        "fitness_goal": "muscle_gain",
    })
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
class TestSessionsAPI:
    def test_start_and_get(self, client, workout, user_id):
        response = client.post("/sessions", json={"workout": workout})
        assert response.status_code == 201
        session_id = response.json()["session_id"]

        session = client.get(f"/sessions/{session_id}").json()
        assert session["user_id"] == user_id
        assert session["workout_id"] == workout["id"]
        assert session["completed"] is False

    def test_complete_updates_stats(self, client, workout):
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]

        response = client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 30})
        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert response.json()["duration"] == 30

        stats = client.get("/stats/me").json()
        assert stats["total_workouts"] == 1
        assert stats["total_hours"] == pytest.approx(0.5)

    def test_complete_twice_counts_once(self, client, workout):
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]
        client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 10})
        client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 10})

        assert client.get("/stats/me").json()["total_workouts"] == 1

    def test_history_lists_own_sessions(self, client, fake_session_repo, workout, other_user_id):
        fake_session_repo.seed([{
            "id": "theirs",
            "user_id": other_user_id,
            "workout_id": "w",
            "workout": {},
            "start_time": datetime(2026, 3, 1, tzinfo=timezone.utc),
            "completed": False,
        }])
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]
        client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 12})

        response = client.get("/sessions")
        assert response.status_code == 200
        history = response.json()
        assert [s["id"] for s in history] == [session_id]
        assert history[0]["completed"] is True

    def test_negative_duration_is_422(self, client, workout):
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]
        response = client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": -1})
        assert response.status_code == 422

    def test_missing_session_is_404(self, client):
        assert client.get("/sessions/missing").status_code == 404
        response = client.post("/sessions/missing/complete", json={"duration_minutes": 5})
        assert response.status_code == 404

    def test_other_users_session_is_404(self, client, fake_session_repo, other_user_id):
        fake_session_repo.seed([{
            "id": "theirs",
            "user_id": other_user_id,
            "workout_id": "w",
            "workout": {},
            "start_time": datetime(2026, 3, 1, tzinfo=timezone.utc),
            "completed": False,
        }])
        assert client.get("/sessions/theirs").status_code == 404
        response = client.post("/sessions/theirs/complete", json={"duration_minutes": 5})
        assert response.status_code == 404


@pytest.mark.integration
def test_stats_defaults(client, user_id):
    response = client.get("/stats/me")
    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == user_id
    assert data["current_level"] == 1
    assert data["total_workouts"] == 0
