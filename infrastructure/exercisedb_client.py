"""
HTTP client for the ExerciseDB catalog (RapidAPI).

Implements the ExerciseCatalog port. Every failure to get a usable answer
from the catalog (auth rejected, rate limited, server error, connection
refused, timeout) surfaces as CatalogOfflineError; a missing single
exercise surfaces as ExerciseNotFoundError.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlparse

import httpx

from application.exceptions import CatalogOfflineError, ExerciseNotFoundError
from models.exercise import Exercise

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = (
    "Exercise database is currently offline. We're working to restore the service."
)
RATE_LIMITED_MESSAGE = (
    "Exercise database is currently experiencing high traffic. "
    "We're working to restore normal service."
)


class ExerciseDBClient:
    """
    HTTP client for ExerciseDB.

    Maps raw catalog records to Exercise models with derived difficulty,
    category and description.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
    ):
        """
        Initialize the catalog client.

        Args:
            base_url: Base URL of ExerciseDB (e.g., "https://exercisedb.p.rapidapi.com")
            api_key: RapidAPI key
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._host = urlparse(self._base_url).netloc

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self._host,
        }

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a catalog path and return the decoded JSON body.

        Raises:
            CatalogOfflineError: On any non-2xx status or transport failure
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=self._headers)

                if response.status_code == 200:
                    return response.json()

                logger.error(
                    f"ExerciseDB error: {response.status_code} - {response.text}"
                )
                if response.status_code == 404:
                    return None
                if response.status_code == 429:
                    raise CatalogOfflineError(RATE_LIMITED_MESSAGE, response.status_code)
                raise CatalogOfflineError(OFFLINE_MESSAGE, response.status_code)

        except httpx.ConnectError as e:
            logger.error(f"ExerciseDB unavailable: {e}")
            raise CatalogOfflineError(OFFLINE_MESSAGE) from e
        except httpx.TimeoutException as e:
            logger.error(f"ExerciseDB timeout: {e}")
            raise CatalogOfflineError(OFFLINE_MESSAGE) from e
        except ValueError as e:
            logger.error(f"ExerciseDB returned invalid JSON: {e}")
            raise CatalogOfflineError(OFFLINE_MESSAGE) from e

    async def _get_list(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        data = await self._get(path, params)
        if data is None:
            raise CatalogOfflineError(OFFLINE_MESSAGE, 404)
        return data or []

    async def get_exercises(self, limit: int = 20) -> List[Exercise]:
        data = await self._get_list("/exercises", {"limit": limit})
        return [Exercise.from_catalog(item) for item in data]

    async def get_exercises_by_body_part(
        self,
        body_part: str,
        limit: int = 20,
    ) -> List[Exercise]:
        """
        List exercises for one body part.

        Raises:
            CatalogOfflineError: If the catalog cannot serve the request
        """
        path = f"/exercises/bodyPart/{quote(body_part, safe='')}"
        data = await self._get_list(path, {"limit": limit})
        return [Exercise.from_catalog(item) for item in data]

    async def get_body_parts(self) -> List[str]:
        return list(await self._get_list("/exercises/bodyPartList"))

    async def get_exercise_by_id(self, exercise_id: str) -> Exercise:
        """
        Get a single exercise.

        Raises:
            ExerciseNotFoundError: If the catalog has no such exercise
            CatalogOfflineError: If the catalog cannot serve the request
        """
        data = await self._get(f"/exercises/exercise/{quote(exercise_id, safe='')}")
        if not data:
            raise ExerciseNotFoundError(exercise_id)
        return Exercise.from_catalog(data)

    def get_exercise_gif_url(self, exercise_id: str, resolution: str = "360") -> str:
        """Build the image URL for an exercise animation."""
        return (
            f"{self._base_url}/image?exerciseId={quote(exercise_id, safe='')}"
            f"&resolution={resolution}&rapidapi-key={self._api_key}"
        )
