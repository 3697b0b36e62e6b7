"""
BookingManager use case.

Per (instance, member) the booking state machine is simply
Unbooked -> Booked -> Unbooked. All checks done here are early rejections for
a clear error; the repository re-validates capacity and uniqueness atomically
when it commits.
"""

import logging
from datetime import date
from typing import Optional

from application.exceptions import (
    AlreadyBookedError,
    CapacityExceededError,
    MemberNotFoundError,
    ScheduleNotFoundError,
    WorkoutTypeRequiredError,
)
from application.ports import MemberProfileRepository, ScheduleRepository
from application.use_cases.materialize_schedule import ScheduleMaterializer
from domain.models import Booking, ScheduleInstance, WorkoutType

logger = logging.getLogger(__name__)


class BookingManager:
    """
    Capacity-safe booking and cancellation of schedule instances.

    Usage:
        >>> manager = BookingManager(schedule_repo=schedule_repo)
        >>> booking = manager.book("sched-1", "user-1")
        >>> manager.cancel("sched-1", "user-1")
    """

    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        profile_repo: Optional[MemberProfileRepository] = None,
        materializer: Optional[ScheduleMaterializer] = None,
    ) -> None:
        self._schedule_repo = schedule_repo
        self._profile_repo = profile_repo
        self._materializer = materializer

    def _get_instance(self, schedule_id: str) -> ScheduleInstance:
        row = self._schedule_repo.get_by_id(schedule_id)
        if not row:
            raise ScheduleNotFoundError(schedule_id)
        return ScheduleInstance.model_validate(row)

    def book(
        self,
        schedule_id: str,
        user_id: str,
        workout_type: Optional[WorkoutType] = None,
    ) -> Booking:
        """
        Book a member into an instance.

        On Friday and Saturday the member chooses UPPER or LOWER; the booking
        records that choice. On other days the instance's type is recorded.

        Raises:
            ScheduleNotFoundError: No such instance
            AlreadyBookedError: Member already holds a seat
            CapacityExceededError: No seats left
            WorkoutTypeRequiredError: Flexible day and no workout_type given
        """
        instance = self._get_instance(schedule_id)

        if instance.booking_for(user_id) is not None:
            logger.warning(f"User {user_id} already booked for schedule {schedule_id}")
            raise AlreadyBookedError(schedule_id, user_id)

        if instance.is_full:
            logger.warning(
                f"Schedule {schedule_id} full ({instance.current_participants}/{instance.capacity})"
            )
            raise CapacityExceededError(schedule_id, instance.capacity)

        if instance.is_flexible_day:
            if workout_type is None:
                raise WorkoutTypeRequiredError(schedule_id, instance.day_of_week)
            resolved = WorkoutType(workout_type)
        else:
            resolved = instance.workout_type

        row = self._schedule_repo.book(schedule_id, user_id, resolved.value)
        booking = Booking.model_validate(row)
        logger.info(
            f"Booked user {user_id} into schedule {schedule_id} ({resolved.value})"
        )
        return booking

    def cancel(self, schedule_id: str, user_id: str) -> None:
        """
        Cancel a member's booking.

        Raises:
            ScheduleNotFoundError: No such instance
            NotBookedError: Member holds no seat in the instance
        """
        self._schedule_repo.cancel(schedule_id, user_id)
        logger.info(f"Cancelled booking of user {user_id} for schedule {schedule_id}")

    def add_member(
        self,
        schedule_id: str,
        member_id: str,
        workout_type: Optional[WorkoutType] = None,
    ) -> Booking:
        """
        Book a member on their behalf (admin operation).

        Same rules as ``book`` except that on flexible days a missing
        workout_type falls back to the instance's type.

        Raises:
            MemberNotFoundError: Unknown member
        """
        instance = self._get_instance(schedule_id)
        if self._profile_repo is not None and not self._profile_repo.get_by_id(member_id):
            raise MemberNotFoundError(member_id)

        if workout_type is None and instance.is_flexible_day:
            workout_type = instance.workout_type
        return self.book(schedule_id, member_id, workout_type)

    def book_template_slot(
        self,
        default_schedule_id: str,
        on_date: date,
        user_id: str,
        workout_type: Optional[WorkoutType] = None,
    ) -> Booking:
        """
        Book a template slot that may not be materialized yet.

        Materializes (or fetches) the instance first and books against the
        canonical instance id, whichever caller created it.
        """
        if self._materializer is None:
            raise RuntimeError("BookingManager was built without a materializer")
        result = self._materializer.materialize(default_schedule_id, on_date)
        return self.book(result.instance.id, user_id, workout_type)
