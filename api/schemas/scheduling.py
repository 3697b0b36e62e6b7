"""
Request and response models for the scheduling endpoints.

Request bodies accept the camelCase keys used by the web client as well as
snake_case (``populate_by_name``).
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import (
    Booking,
    DefaultSchedule,
    LiftType,
    ScheduleInstance,
    WorkoutType,
)


# =============================================================================
# Requests
# =============================================================================


class CreateScheduleRequest(BaseModel):
    """Ad-hoc instance not tied to a template."""

    date: dt.date
    time: str = Field(..., description="24h HH:MM")
    capacity: Optional[int] = Field(None, gt=0)
    workout_type: WorkoutType = Field(..., alias="workoutType")

    model_config = {"populate_by_name": True}


class BookScheduleRequest(BaseModel):
    """Only meaningful on Friday and Saturday, where the member picks the split."""

    workout_type: Optional[WorkoutType] = Field(None, alias="workoutType")

    model_config = {"populate_by_name": True}


class AddUserToClassRequest(BaseModel):
    schedule_id: str = Field(..., alias="scheduleId")
    user_id: str = Field(..., alias="userId")
    workout_type: Optional[WorkoutType] = Field(None, alias="workoutType")

    model_config = {"populate_by_name": True}


class DefaultScheduleUpsertRequest(BaseModel):
    """Create a template, or update one when ``id`` is given."""

    id: Optional[str] = None
    day_of_week: int = Field(..., alias="dayOfWeek", description="0=Sunday .. 6=Saturday")
    time: str = Field(..., description="24h HH:MM")
    workout_type: WorkoutType = Field(..., alias="workoutType")
    capacity: Optional[int] = None
    coach_id: Optional[str] = Field(None, alias="coachId")
    is_active: Optional[bool] = Field(None, alias="isActive")

    model_config = {"populate_by_name": True}


class CreateFromDefaultRequest(BaseModel):
    default_schedule_id: str = Field(..., alias="defaultScheduleId")
    date: Optional[dt.date] = Field(
        None, description="Defaults to the template's next occurrence"
    )

    model_config = {"populate_by_name": True}


# =============================================================================
# Responses
# =============================================================================


class ScheduleListResponse(BaseModel):
    schedules: List[ScheduleInstance]
    count: int


class ScheduleResponse(BaseModel):
    message: str
    schedule: ScheduleInstance


class BookingResponse(BaseModel):
    message: str
    booking: Booking


class DefaultScheduleListResponse(BaseModel):
    default_schedules: List[DefaultSchedule]
    count: int


class DefaultScheduleResponse(BaseModel):
    message: str
    default_schedule: DefaultSchedule


class MessageResponse(BaseModel):
    message: str


class LiftWeightResponse(BaseModel):
    lift_type: LiftType
    percentage: float
    weight: float
