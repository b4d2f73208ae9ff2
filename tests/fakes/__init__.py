"""
Fake implementations for testing.

In-memory implementations of the port interfaces (catalog, repositories),
a manual ticker, and an LLM client stand-in for fast, isolated tests.
"""

from tests.fakes.challenge_repository import FakeChallengeRepository
from tests.fakes.exercise_catalog import FakeExerciseCatalog, make_exercise
from tests.fakes.llm_client import FakeChatClient
from tests.fakes.profile_repository import FakeProfileRepository
from tests.fakes.saved_workout_repository import FakeSavedWorkoutRepository
from tests.fakes.session_repository import FakeSessionRepository
from tests.fakes.stats_repository import FakeStatsRepository
from tests.fakes.ticker import ManualTicker

__all__ = [
    "FakeChallengeRepository",
    "FakeChatClient",
    "FakeExerciseCatalog",
    "FakeProfileRepository",
    "FakeSavedWorkoutRepository",
    "FakeSessionRepository",
    "FakeStatsRepository",
    "ManualTicker",
    "make_exercise",
]
