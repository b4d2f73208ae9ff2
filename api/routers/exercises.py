"""
Exercise catalog router.

Read-only browsing of the exercise catalog. Catalog outages map to 503
so clients can show an offline message.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_exercise_catalog
from application.exceptions import CatalogOfflineError, ExerciseNotFoundError
from application.ports import ExerciseCatalog
from models.exercise import Exercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


def _offline(e: CatalogOfflineError) -> HTTPException:
    logger.warning(f"Exercise catalog offline (status={e.status_code}): {e}")
    return HTTPException(status_code=503, detail=str(e))


@router.get("/body-parts", response_model=List[str])
async def list_body_parts(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    """List the body parts known to the catalog."""
    try:
        return await catalog.get_body_parts()
    except CatalogOfflineError as e:
        raise _offline(e)


@router.get("/body-part/{body_part}", response_model=List[Exercise])
async def list_exercises_by_body_part(
    body_part: str,
    limit: int = Query(20, ge=1, le=100, description="Maximum exercises to return"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    """List exercises for a body part."""
    try:
        return await catalog.get_exercises_by_body_part(body_part, limit)
    except CatalogOfflineError as e:
        raise _offline(e)


@router.get("/{exercise_id}", response_model=Exercise)
async def get_exercise(
    exercise_id: str,
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    """
    Get a single exercise.

    Raises:
        HTTPException 404: If the exercise does not exist
        HTTPException 503: If the catalog is offline
    """
    try:
        return await catalog.get_exercise_by_id(exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogOfflineError as e:
        raise _offline(e)
