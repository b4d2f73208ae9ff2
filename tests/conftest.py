"""
Pytest fixtures for fitcoach-api tests.

Routers are exercised through a TestClient whose dependencies are
overridden with the in-memory fakes from tests/fakes.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_challenge_repo,
    get_coach_service,
    get_current_user,
    get_exercise_catalog,
    get_profile_repo,
    get_saved_workout_repo,
    get_session_repo,
    get_stats_repo,
)
from backend.main import create_app
from backend.settings import Settings
from services.coach_service import CoachService
from tests.fakes import (
    FakeChallengeRepository,
    FakeExerciseCatalog,
    FakeProfileRepository,
    FakeSavedWorkoutRepository,
    FakeSessionRepository,
    FakeStatsRepository,
    make_exercise,
)


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


@pytest.fixture
def user_id() -> str:
    return TEST_USER_ID


@pytest.fixture
def other_user_id() -> str:
    return OTHER_USER_ID


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("EXERCISEDB_API_KEY", "test-rapidapi-key")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_catalog() -> FakeExerciseCatalog:
    """Catalog seeded with chest, back and cardio exercises."""
    catalog = FakeExerciseCatalog()
    catalog.seed("chest", [
        make_exercise("c1", "chest", "body weight", name="push-up"),
        make_exercise("c2", "chest", "dumbbell", name="dumbbell bench press"),
        make_exercise("c3", "chest", "barbell", name="barbell bench press"),
        make_exercise("c4", "chest", "cable", name="cable fly"),
        make_exercise("c5", "chest", "body weight", name="diamond push-up"),
    ])
    catalog.seed("back", [
        make_exercise("b1", "back", "body weight", name="pull-up", target="lats"),
        make_exercise("b2", "back", "barbell", name="barbell row", target="upper back"),
        make_exercise("b3", "back", "cable", name="cable row", target="upper back"),
    ])
    catalog.seed("cardio", [
        make_exercise("k1", "cardio", "body weight", name="burpee", target="cardiovascular system"),
        make_exercise("k2", "cardio", "body weight", name="jumping jack", target="cardiovascular system"),
    ])
    return catalog


@pytest.fixture
def fake_session_repo() -> FakeSessionRepository:
    return FakeSessionRepository()


@pytest.fixture
def fake_stats_repo() -> FakeStatsRepository:
    return FakeStatsRepository()


@pytest.fixture
def fake_challenge_repo() -> FakeChallengeRepository:
    return FakeChallengeRepository()


@pytest.fixture
def fake_saved_workout_repo() -> FakeSavedWorkoutRepository:
    return FakeSavedWorkoutRepository()


@pytest.fixture
def fake_profile_repo() -> FakeProfileRepository:
    return FakeProfileRepository()


@pytest.fixture
def challenge_data() -> Dict[str, Any]:
    """A joinable three-workout challenge."""
    return {
        "id": "challenge-1",
        "title": "3 Workouts in a Week",
        "description": "Complete three workouts in seven days",
        "type": "consistency",
        "duration": 7,
        "target": 3,
        "reward": "Consistency badge",
        "xp_reward": 150,
        "is_active": True,
        "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
    }


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        exercisedb_api_key="test-rapidapi-key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(
    app,
    fake_catalog,
    fake_session_repo,
    fake_stats_repo,
    fake_challenge_repo,
    fake_saved_workout_repo,
    fake_profile_repo,
) -> Generator[TestClient, None, None]:
    """
    Per-test TestClient with every external dependency replaced by a fake.

    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_exercise_catalog] = lambda: fake_catalog
    app.dependency_overrides[get_session_repo] = lambda: fake_session_repo
    app.dependency_overrides[get_stats_repo] = lambda: fake_stats_repo
    app.dependency_overrides[get_challenge_repo] = lambda: fake_challenge_repo
    app.dependency_overrides[get_saved_workout_repo] = lambda: fake_saved_workout_repo
    app.dependency_overrides[get_profile_repo] = lambda: fake_profile_repo
    app.dependency_overrides[get_coach_service] = lambda: CoachService(api_key=None)
    yield TestClient(app)
    app.dependency_overrides.clear()
