"""Integration tests for the challenges API."""

import pytest


@pytest.mark.integration
class TestChallengesAPI:
    def test_list_active(self, client, fake_challenge_repo, challenge_data):
        fake_challenge_repo.seed([challenge_data, {**challenge_data, "id": "old", "is_active": False}])
        response = client.get("/challenges")
        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == ["challenge-1"]

    def test_join_and_list_mine(self, client, fake_challenge_repo, challenge_data, user_id):
        fake_challenge_repo.seed([challenge_data])

        response = client.post("/challenges/challenge-1/join")
        assert response.status_code == 201
        joined = response.json()
        assert joined["user_id"] == user_id
        assert joined["current"] == 0

        mine = client.get("/challenges/me").json()
        assert [c["id"] for c in mine] == [joined["id"]]

    def test_join_unknown_is_404(self, client):
        assert client.post("/challenges/missing/join").status_code == 404

    def test_workout_completion_advances_challenge(self, client, fake_challenge_repo, challenge_data):
        fake_challenge_repo.seed([{**challenge_data, "target": 1, "xp_reward": 50}])
        client.post("/challenges/challenge-1/join")

        workout = client.post("/workouts/generate", json={
            "duration": 15,
            "difficulty": "Beginner",
            "body_parts": ["back"],
            "fitness_goal": "strength",
        }).json()
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]
        client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 15})

        mine = client.get("/challenges/me").json()
        assert mine[0]["completed"] is True
        assert mine[0]["progress"] == 100.0
        assert client.get("/stats/me").json()["total_xp"] == 50

    def test_completed_challenge_added_to_profile(
        self, client, fake_challenge_repo, challenge_data
    ):
        fake_challenge_repo.seed([{**challenge_data, "target": 1}])
        client.put("/profile/me", json={"fitness_level": "beginner"})
        client.post("/challenges/challenge-1/join")

        workout = client.post("/workouts/generate", json={
            "duration": 15,
            "difficulty": "Beginner",
            "body_parts": ["chest"],
            "fitness_goal": "strength",
        }).json()
        session_id = client.post("/sessions", json={"workout": workout}).json()["session_id"]
        client.post(f"/sessions/{session_id}/complete", json={"duration_minutes": 15})

        profile = client.get("/profile/me").json()
        assert profile["completed_challenges"] == ["challenge-1"]
        assert profile["fitness_level"] == "beginner"


@pytest.mark.integration
class TestGeneratedChallengesAPI:
    def test_save_list_and_join(self, client, user_id):
        response = client.post("/challenges/generated", json=[
            {"id": "gen-1", "title": "Ten push-up days", "duration": 10, "target": 10},
            {"title": "Cardio week", "type": "cardio", "target": 4, "xp_reward": 80},
        ])
        assert response.status_code == 201
        saved = response.json()
        assert saved[0]["id"] == "gen-1"
        assert saved[1]["duration"] == 30
        assert all(c["is_ai"] for c in saved)

        listed = client.get("/challenges/generated").json()
        assert {c["id"] for c in listed} == {c["id"] for c in saved}

        joined = client.post("/challenges/generated/gen-1/join")
        assert joined.status_code == 201
        assert joined.json()["challenge_id"] == "gen-1"
        assert joined.json()["user_id"] == user_id

        mine = client.get("/challenges/me").json()
        assert [c["challenge_id"] for c in mine] == ["gen-1"]

    def test_generated_not_in_shared_list(self, client):
        client.post("/challenges/generated", json=[{"id": "gen-1", "title": "Mine", "target": 3}])
        assert client.get("/challenges").json() == []

    def test_join_unknown_generated_is_404(self, client):
        assert client.post("/challenges/generated/missing/join").status_code == 404

    def test_invalid_target_is_422(self, client):
        response = client.post("/challenges/generated", json=[{"title": "Bad", "target": 0}])
        assert response.status_code == 422
