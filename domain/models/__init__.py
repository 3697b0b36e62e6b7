"""
Domain models for the class scheduling service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):
- DefaultSchedule: recurring weekly class template
- ScheduleInstance: dated, bookable class session
- Booking: a member's seat in an instance
- WorkoutScheme: week/day prescription of reps and percentages
- MemberProfile / MemberMaxLifts: data owned by the profile collaborator
- Weight variants: ScalarWeight | PerSetWeight | UnavailableWeight

Usage:
    >>> from domain.models import ScheduleInstance
    >>> instance = ScheduleInstance.model_validate(row)
    >>> instance.is_flexible_day
    False
"""

from domain.models.class_detail import (
    ClassDetailView,
    LiftPrescription,
    ParticipantView,
    SupplementalExercise,
    SupplementalWorkout,
)
from domain.models.enums import LIFTS_BY_WORKOUT_TYPE, LiftType, Role, WorkoutType
from domain.models.member import MemberMaxLifts, MemberProfile
from domain.models.schedule import (
    DAY_NAMES,
    FLEXIBLE_DAYS,
    Booking,
    DefaultSchedule,
    ScheduleInstance,
    normalize_time,
    sunday_based_weekday,
)
from domain.models.scheme import WorkoutScheme
from domain.models.weight import PerSetWeight, ScalarWeight, UnavailableWeight, Weight

__all__ = [
    # Entities
    "DefaultSchedule",
    "ScheduleInstance",
    "Booking",
    "WorkoutScheme",
    "MemberMaxLifts",
    "MemberProfile",
    # Read models
    "ClassDetailView",
    "ParticipantView",
    "LiftPrescription",
    "SupplementalWorkout",
    "SupplementalExercise",
    # Weight variants
    "Weight",
    "ScalarWeight",
    "PerSetWeight",
    "UnavailableWeight",
    # Enums
    "WorkoutType",
    "LiftType",
    "Role",
    "LIFTS_BY_WORKOUT_TYPE",
    # Helpers
    "DAY_NAMES",
    "FLEXIBLE_DAYS",
    "normalize_time",
    "sunday_based_weekday",
]
