"""
Read models for the live "current class" view.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.enums import LiftType, WorkoutType
from domain.models.scheme import WorkoutScheme
from domain.models.weight import Weight


class SupplementalExercise(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class SupplementalWorkout(BaseModel):
    """Accessory circuit shown alongside the main lifts."""

    id: str
    name: str
    category: WorkoutType
    body_part: Optional[str] = None
    description: Optional[str] = None
    exercises: List[SupplementalExercise] = Field(default_factory=list)


class LiftPrescription(BaseModel):
    lift: LiftType
    weight: Weight


class ParticipantView(BaseModel):
    user_id: str
    first_name: str
    last_initial: str
    workout_type: WorkoutType
    lifts: List[LiftPrescription] = Field(default_factory=list)


class ClassDetailView(BaseModel):
    """A class instance with each participant's per-set weights."""

    schedule_id: str
    date: dt.date
    time: str
    workout_type: WorkoutType
    week: int
    scheme: WorkoutScheme
    participants: List[ParticipantView] = Field(default_factory=list)
    supplemental_workouts: List[SupplementalWorkout] = Field(default_factory=list)
