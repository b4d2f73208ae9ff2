"""Integration tests for the exercise catalog API."""

import pytest


@pytest.mark.integration
class TestExercisesAPI:
    def test_body_parts(self, client):
        response = client.get("/exercises/body-parts")
        assert response.status_code == 200
        assert response.json() == ["chest", "back", "cardio"]

    def test_by_body_part(self, client):
        response = client.get("/exercises/body-part/back", params={"limit": 2})
        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == ["b1", "b2"]

    def test_by_body_part_limit_validated(self, client):
        response = client.get("/exercises/body-part/back", params={"limit": 0})
        assert response.status_code == 422

    def test_get_exercise(self, client):
        response = client.get("/exercises/c2")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "dumbbell bench press"
        assert data["difficulty"] == "Beginner"

    def test_unknown_exercise_is_404(self, client):
        assert client.get("/exercises/nope").status_code == 404

    @pytest.mark.parametrize(
        "path",
        ["/exercises/body-parts", "/exercises/body-part/chest", "/exercises/c1"],
    )
    def test_offline_catalog_is_503(self, client, fake_catalog, path):
        fake_catalog.go_offline()
        response = client.get(path)
        assert response.status_code == 503
        assert "offline" in response.json()["detail"]
