"""
Exercise catalog port (interface).

This Protocol defines the contract for the external exercise catalog.
Infrastructure implementations (e.g., ExerciseDB) must satisfy this interface.
"""

from typing import List, Protocol

from models.exercise import Exercise


class ExerciseCatalog(Protocol):
    """
    Read-only access to the exercise catalog.

    Implementations raise CatalogOfflineError when the catalog cannot
    serve a request and ExerciseNotFoundError for unknown ids.
    """

    async def get_exercises(self, limit: int = 20) -> List[Exercise]:
        """
        List exercises.

        Args:
            limit: Maximum number of results

        Returns:
            List of exercises
        """
        ...

    async def get_exercises_by_body_part(
        self,
        body_part: str,
        limit: int = 20,
    ) -> List[Exercise]:
        """
        List exercises for one body part.

        Args:
            body_part: Catalog body part (e.g. "chest", "cardio")
            limit: Maximum number of results

        Returns:
            List of exercises for that body part
        """
        ...

    async def get_body_parts(self) -> List[str]:
        """
        List the body parts the catalog knows about.

        Returns:
            List of body part names
        """
        ...

    async def get_exercise_by_id(self, exercise_id: str) -> Exercise:
        """
        Get a single exercise.

        Args:
            exercise_id: Catalog exercise id

        Returns:
            The exercise
        """
        ...
