"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Each carries the structured data a caller needs to render a specific state,
so the API layer never has to match on message strings.
"""

from typing import Any, Dict, Optional


class SchedulingError(Exception):
    """Base class for all scheduling, booking and computation errors."""

    code = "scheduling_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(SchedulingError):
    """Malformed input, rejected before any state change."""

    code = "validation_error"


class InvalidWeekError(ValidationError):
    code = "invalid_week"

    def __init__(self, week: int, max_week: int):
        super().__init__(f"Week must be between 1 and {max_week}, got {week}")
        self.week = week


class InvalidDayError(ValidationError):
    code = "invalid_day"

    def __init__(self, day: int):
        super().__init__(f"Day must be between 1 (Monday) and 7 (Sunday), got {day}")
        self.day = day


class InvalidLiftTypeError(ValidationError):
    code = "invalid_lift_type"


class DayOfWeekMismatchError(ValidationError):
    """Requested date does not fall on the template's day of week."""

    code = "day_of_week_mismatch"

    def __init__(self, requested_day: int, expected_day: int):
        super().__init__(
            "Selected date does not match the day of week for this default schedule"
        )
        self.requested_day = requested_day
        self.expected_day = expected_day

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "requested_day": self.requested_day,
            "expected_day": self.expected_day,
        }


class MaxLiftNotSetError(ValidationError):
    code = "max_lift_not_set"

    def __init__(self, lift: str):
        super().__init__(f"Max weight for {lift} not set")
        self.lift = lift


# -----------------------------------------------------------------------------
# Business-rule conflicts
# -----------------------------------------------------------------------------


class BookingError(SchedulingError):
    """Recoverable booking conflict; the caller may adjust input and retry."""

    def __init__(self, message: str, schedule_id: str):
        super().__init__(message)
        self.schedule_id = schedule_id

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "schedule_id": self.schedule_id}


class CapacityExceededError(BookingError):
    code = "capacity_exceeded"

    def __init__(self, schedule_id: str, capacity: Optional[int] = None):
        super().__init__("This class is at full capacity", schedule_id)
        self.capacity = capacity


class AlreadyBookedError(BookingError):
    code = "already_booked"

    def __init__(self, schedule_id: str, user_id: str):
        super().__init__("You are already booked for this time slot", schedule_id)
        self.user_id = user_id


class NotBookedError(BookingError):
    code = "not_booked"

    def __init__(self, schedule_id: str, user_id: str):
        super().__init__("Booking not found", schedule_id)
        self.user_id = user_id


class WorkoutTypeRequiredError(BookingError):
    """Flexible-day booking attempted without choosing UPPER or LOWER."""

    code = "workout_type_required"

    def __init__(self, schedule_id: str, day_of_week: int):
        super().__init__(
            "Please select a workout type (UPPER or LOWER) for this class",
            schedule_id,
        )
        self.day_of_week = day_of_week

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "requires_workout_type": True,
            "day_of_week": self.day_of_week,
        }


class ScheduleConflictError(SchedulingError):
    """An ad-hoc instance already exists for the requested date and time."""

    code = "schedule_conflict"

    def __init__(self, existing_id: str):
        super().__init__("A schedule already exists for this date and time")
        self.existing_id = existing_id

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "schedule_id": self.existing_id}


# -----------------------------------------------------------------------------
# Storage signals
# -----------------------------------------------------------------------------


class DuplicateScheduleError(SchedulingError):
    """Uniqueness constraint on (default_schedule_id, date) was violated.

    Raised by repositories when a concurrent materialization won the race.
    Never surfaced to end users.
    """

    code = "duplicate_schedule"


class StorageError(SchedulingError):
    """Opaque storage failure with no retry contract."""

    code = "storage_error"


# -----------------------------------------------------------------------------
# Not found
# -----------------------------------------------------------------------------


class NotFoundError(SchedulingError):
    code = "not_found"


class ScheduleNotFoundError(NotFoundError):
    code = "schedule_not_found"

    def __init__(self, schedule_id: str):
        super().__init__("Schedule not found")
        self.schedule_id = schedule_id


class DefaultScheduleNotFoundError(NotFoundError):
    code = "default_schedule_not_found"

    def __init__(self, default_schedule_id: str):
        super().__init__("Default schedule not found")
        self.default_schedule_id = default_schedule_id


class MemberNotFoundError(NotFoundError):
    code = "member_not_found"

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class InstanceNotFoundError(NotFoundError):
    """No class is scheduled for the requested hour. An expected outcome."""

    code = "no_class_in_session"

    def __init__(self, message: str = "No class scheduled for the current or upcoming hour"):
        super().__init__(message)
