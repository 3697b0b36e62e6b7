"""
Workout scheme: the rep/percentage prescription for one program session.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from domain.models.enums import WorkoutType


class WorkoutScheme(BaseModel):
    """Read-only prescription keyed by (week, day)."""

    week: int = Field(ge=1)
    day: int = Field(ge=1, le=7, description="1=Monday, 7=Sunday")
    lift_type: WorkoutType
    sets: List[int]
    reps: List[int]
    percentages: List[float]
    rest_time_seconds: int = Field(ge=0)

    @model_validator(mode="after")
    def check_lengths(self) -> "WorkoutScheme":
        if not (len(self.sets) == len(self.reps) == len(self.percentages)):
            raise ValueError("sets, reps and percentages must have the same length")
        return self
