"""
DefaultScheduleRegistry use case.

CRUD over recurring weekly templates. Admins and coaches write; the
materializer and the public listing read.
"""

import logging
from typing import Any, Dict, List, Optional

from application.exceptions import DefaultScheduleNotFoundError, ValidationError
from application.ports import DefaultScheduleRepository
from domain.models import DefaultSchedule, WorkoutType, normalize_time

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 8


class DefaultScheduleRegistry:
    """
    Registry of recurring class templates.

    Usage:
        >>> registry = DefaultScheduleRegistry(default_schedule_repo=repo)
        >>> template = registry.upsert(
        ...     acting_user_id="admin-1",
        ...     day_of_week=5,
        ...     time="16:00",
        ...     workout_type=WorkoutType.UPPER,
        ... )
    """

    def __init__(
        self,
        default_schedule_repo: DefaultScheduleRepository,
        default_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._repo = default_schedule_repo
        self._default_capacity = default_capacity

    def list(self, *, include_inactive: bool = False) -> List[DefaultSchedule]:
        rows = self._repo.list(include_inactive=include_inactive)
        return [DefaultSchedule.model_validate(row) for row in rows]

    def get(self, default_schedule_id: str) -> DefaultSchedule:
        row = self._repo.get_by_id(default_schedule_id)
        if not row:
            raise DefaultScheduleNotFoundError(default_schedule_id)
        return DefaultSchedule.model_validate(row)

    def upsert(
        self,
        *,
        acting_user_id: str,
        day_of_week: int,
        time: str,
        workout_type: WorkoutType,
        capacity: Optional[int] = None,
        coach_id: Optional[str] = None,
        is_active: Optional[bool] = None,
        default_schedule_id: Optional[str] = None,
    ) -> DefaultSchedule:
        """
        Create or update a template.

        An empty coach_id makes the acting admin the coach.

        Raises:
            ValidationError: day, time or capacity out of range
        """
        if day_of_week < 0 or day_of_week > 6:
            raise ValidationError(
                "Day of week must be between 0 (Sunday) and 6 (Saturday)"
            )
        try:
            time = normalize_time(time)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if capacity is not None and capacity <= 0:
            raise ValidationError("Capacity must be a positive number")

        data: Dict[str, Any] = {
            "day_of_week": day_of_week,
            "time": time,
            "capacity": capacity or self._default_capacity,
            "workout_type": WorkoutType(workout_type).value,
            "coach_id": coach_id or acting_user_id,
            "is_active": True if is_active is None else is_active,
        }
        if default_schedule_id:
            data["id"] = default_schedule_id

        stored = self._repo.upsert(data)
        template = DefaultSchedule.model_validate(stored)
        logger.info(
            f"{'Updated' if default_schedule_id else 'Created'} default schedule "
            f"{template.id}: {template.day_name} {template.time} {template.workout_type.value}"
        )
        return template

    def delete(self, default_schedule_id: str) -> None:
        """
        Delete a template. Instances already materialized from it stay.

        Raises:
            DefaultScheduleNotFoundError: No such template
        """
        if not self._repo.delete(default_schedule_id):
            raise DefaultScheduleNotFoundError(default_schedule_id)
        logger.info(f"Deleted default schedule {default_schedule_id}")
