"""
Exercise catalog models.

Exercises are read-only reference data served by the external catalog.
Difficulty and category are derived on ingestion, never stored upstream.
"""

from typing import List

from pydantic import BaseModel, Field

from core.constants import CARDIO_BODY_PART


BODY_WEIGHT_EQUIPMENT = ("body weight", "assisted")
BEGINNER_EQUIPMENT = ("dumbbell", "kettlebell", "resistance band")
INTERMEDIATE_EQUIPMENT = ("barbell", "cable", "smith machine")
ADVANCED_EQUIPMENT = ("olympic barbell", "trap bar")


def derive_difficulty(equipment: str) -> str:
    """
    Derive a difficulty label from an equipment description.

    Checked in order: body weight, beginner, intermediate, advanced.
    Anything unrecognised is Intermediate.
    """
    value = (equipment or "").lower()

    if value in BODY_WEIGHT_EQUIPMENT:
        return "Beginner"
    if any(eq in value for eq in BEGINNER_EQUIPMENT):
        return "Beginner"
    if any(eq in value for eq in INTERMEDIATE_EQUIPMENT):
        return "Intermediate"
    if any(eq in value for eq in ADVANCED_EQUIPMENT):
        return "Advanced"
    return "Intermediate"


class Exercise(BaseModel):
    """A single exercise from the catalog."""

    id: str
    name: str
    body_part: str
    target: str = ""
    equipment: str = "body weight"
    gif_url: str = ""
    instructions: List[str] = Field(default_factory=list)
    secondary_muscles: List[str] = Field(default_factory=list)
    difficulty: str = "Intermediate"
    category: str = ""
    description: str = ""

    @property
    def is_cardio(self) -> bool:
        """Cardio is decided by the catalog body part."""
        return self.body_part.lower() == CARDIO_BODY_PART

    @classmethod
    def from_catalog(cls, data: dict) -> "Exercise":
        """
        Build an Exercise from a raw ExerciseDB payload.

        Args:
            data: Raw exercise dictionary (camelCase keys)

        Returns:
            Exercise with derived difficulty, category and description
        """
        body_part = data.get("bodyPart", "")
        target = data.get("target", "")
        equipment = data.get("equipment", "")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            body_part=body_part,
            target=target,
            equipment=equipment,
            gif_url=data.get("gifUrl", "") or "",
            instructions=data.get("instructions") or [],
            secondary_muscles=data.get("secondaryMuscles") or [],
            difficulty=derive_difficulty(equipment),
            category=body_part,
            description=f"A {body_part} exercise targeting {target} using {equipment}.",
        )
