"""Challenge models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ChallengeType(str, Enum):
    """Kinds of challenge."""

    CONSISTENCY = "consistency"
    STRENGTH = "strength"
    CARDIO = "cardio"
    TRANSFORMATION = "transformation"


class Challenge(BaseModel):
    """A challenge users can join."""

    id: str
    title: str
    description: str = ""
    type: ChallengeType = ChallengeType.CONSISTENCY
    duration: int = Field(gt=0, description="Length in days")
    target: int = Field(gt=0, description="Completed workouts needed")
    reward: str = ""
    xp_reward: int = Field(0, ge=0)
    is_active: bool = True
    created_at: datetime


class UserChallenge(BaseModel):
    """A user's participation in a challenge."""

    id: str
    user_id: str
    challenge_id: str
    challenge: Challenge
    start_date: datetime
    end_date: datetime
    current: int = 0
    progress: float = Field(0.0, ge=0, le=100)
    completed: bool = False
    completed_at: Optional[datetime] = None


class GeneratedChallengeCreate(BaseModel):
    """A personalised challenge to store for one user."""

    id: Optional[str] = None
    title: str = Field(min_length=1, max_length=200)
    description: str = ""
    type: ChallengeType = ChallengeType.CONSISTENCY
    duration: int = Field(30, gt=0, description="Length in days")
    target: int = Field(gt=0, description="Completed workouts needed")
    reward: str = ""
    xp_reward: int = Field(0, ge=0)


class GeneratedChallenge(Challenge):
    """A challenge generated for, and only visible to, one user."""

    user_id: str
    is_ai: bool = True
    generated_at: datetime
