"""User profile models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """Fitness preferences and achievements for a user."""

    user_id: str
    fitness_level: Optional[str] = None
    goals: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    available_time: Optional[str] = None
    completed_challenges: List[str] = Field(default_factory=list)
    preferred_types: List[str] = Field(default_factory=list)
    experience_points: int = Field(0, ge=0)
    updated_at: Optional[datetime] = None


class UserProfileUpdate(BaseModel):
    """
    Request model for saving a profile.

    Only the fields present in the request are written; the rest of the
    stored profile is kept.
    """

    fitness_level: Optional[str] = Field(None, max_length=50)
    goals: Optional[List[str]] = None
    equipment: Optional[List[str]] = None
    available_time: Optional[str] = Field(None, max_length=50)
    preferred_types: Optional[List[str]] = None
    experience_points: Optional[int] = Field(None, ge=0)
