"""
ScheduleCatalog use case.

Listing, ad-hoc creation and deletion of schedule instances.
"""

import logging
from datetime import date
from typing import List, Optional

from application.exceptions import (
    DuplicateScheduleError,
    ScheduleConflictError,
    ScheduleNotFoundError,
    ValidationError,
)
from application.ports import ScheduleRepository
from domain.models import ScheduleInstance, WorkoutType, normalize_time

logger = logging.getLogger(__name__)


class ScheduleCatalog:
    """Admin-facing management of dated schedule instances."""

    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        default_capacity: int = 8,
    ) -> None:
        self._schedule_repo = schedule_repo
        self._default_capacity = default_capacity

    def list(
        self,
        *,
        on_date: Optional[date] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[ScheduleInstance]:
        """List instances on one date, or in an inclusive range."""
        if on_date is not None:
            start_date = end_date = on_date
        if start_date and end_date and start_date > end_date:
            raise ValidationError("start date must not be after end date")
        rows = self._schedule_repo.list_between(start_date, end_date)
        return [ScheduleInstance.model_validate(row) for row in rows]

    def create_adhoc(
        self,
        *,
        acting_user_id: str,
        on_date: date,
        time: str,
        workout_type: WorkoutType,
        capacity: Optional[int] = None,
    ) -> ScheduleInstance:
        """
        Create an instance that is not tied to a template.

        Raises:
            ValidationError: Bad time or capacity
            ScheduleConflictError: An instance exists for (date, time)
        """
        try:
            time = normalize_time(time)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if capacity is not None and capacity <= 0:
            raise ValidationError("Capacity must be a positive number")

        existing = self._schedule_repo.find_by_date_and_time(on_date, time)
        if existing:
            raise ScheduleConflictError(existing["id"])

        try:
            row = self._schedule_repo.create(
                {
                    "date": on_date.isoformat(),
                    "time": time,
                    "capacity": capacity or self._default_capacity,
                    "workout_type": WorkoutType(workout_type).value,
                    "coach_id": acting_user_id,
                    "default_schedule_id": None,
                }
            )
        except DuplicateScheduleError:
            winner = self._schedule_repo.find_by_date_and_time(on_date, time)
            if winner is None:
                raise
            raise ScheduleConflictError(winner["id"])

        instance = ScheduleInstance.model_validate(row)
        logger.info(f"Created ad-hoc schedule {instance.id} for {on_date} {time}")
        return instance

    def delete(self, schedule_id: str) -> None:
        """
        Delete an instance together with its bookings.

        Raises:
            ScheduleNotFoundError: No such instance
        """
        if not self._schedule_repo.delete(schedule_id):
            raise ScheduleNotFoundError(schedule_id)
        logger.info(f"Deleted schedule {schedule_id} and its bookings")
