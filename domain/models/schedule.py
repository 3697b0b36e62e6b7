"""
Schedule domain models: recurring templates, dated instances and bookings.

Day-of-week convention for templates follows the storage schema:
0 = Sunday ... 6 = Saturday.
"""

import datetime as dt
import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.enums import WorkoutType

TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")

# Friday and Saturday, Sunday=0 convention
FLEXIBLE_DAYS = frozenset({5, 6})

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def sunday_based_weekday(day: dt.date) -> int:
    """Day of week for a date with Sunday=0 ... Saturday=6."""
    return (day.weekday() + 1) % 7


def normalize_time(value: str) -> str:
    """Validate an ``HH:MM`` 24h time and zero-pad the hour."""
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        raise ValueError("Time must be in HH:MM format")
    hour, minute = value.split(":")
    return f"{int(hour):02d}:{minute}"


class DefaultSchedule(BaseModel):
    """A recurring weekly class slot."""

    id: str
    day_of_week: int = Field(ge=0, le=6, description="0=Sunday, 6=Saturday")
    time: str
    capacity: int = Field(gt=0)
    workout_type: WorkoutType
    is_active: bool = True
    coach_id: Optional[str] = None

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time(v)

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]


class Booking(BaseModel):
    """A member's seat in a schedule instance."""

    id: str
    schedule_id: str
    user_id: str
    workout_type: Optional[WorkoutType] = Field(
        None, description="Resolved workout type; may differ from the instance on flexible days"
    )


class ScheduleInstance(BaseModel):
    """A concrete, dated and bookable class session."""

    id: str
    date: dt.date
    time: str
    capacity: int = Field(gt=0)
    current_participants: int = Field(default=0, ge=0)
    workout_type: WorkoutType
    coach_id: Optional[str] = None
    default_schedule_id: Optional[str] = Field(
        None, description="Template this instance was materialized from; None for ad-hoc instances"
    )
    bookings: List[Booking] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        # Storage may hand back full timestamps
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        if isinstance(v, dt.datetime):
            return v.date()
        return v

    @property
    def day_of_week(self) -> int:
        return sunday_based_weekday(self.date)

    @property
    def is_flexible_day(self) -> bool:
        """Friday and Saturday classes let members pick UPPER or LOWER."""
        return self.day_of_week in FLEXIBLE_DAYS

    @property
    def is_full(self) -> bool:
        return self.current_participants >= self.capacity

    @property
    def hour(self) -> int:
        return int(self.time.split(":", 1)[0])

    def booking_for(self, user_id: str) -> Optional[Booking]:
        for booking in self.bookings:
            if booking.user_id == user_id:
                return booking
        return None
