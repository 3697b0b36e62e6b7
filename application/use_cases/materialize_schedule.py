"""
ScheduleMaterializer use case.

Turns a recurring template plus a calendar date into a concrete schedule
instance, or returns the instance that already exists for that slot.

Creation is create-if-absent: the store enforces uniqueness on
(default_schedule_id, date) and (date, time). When a concurrent caller wins
the insert race the loser re-reads and returns the winner's instance, so every
caller ends up with the same canonical instance id.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Union

from application.exceptions import (
    DayOfWeekMismatchError,
    DuplicateScheduleError,
    StorageError,
)
from application.ports import ScheduleRepository
from application.use_cases.default_schedule_registry import DefaultScheduleRegistry
from domain.models import DefaultSchedule, ScheduleInstance, sunday_based_weekday

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Created:
    """A new instance was inserted by this call."""

    instance: ScheduleInstance
    created: bool = True


@dataclass(frozen=True)
class AlreadyExists:
    """The slot was already materialized; ``instance`` is the canonical one."""

    instance: ScheduleInstance
    created: bool = False


MaterializeResult = Union[Created, AlreadyExists]


def next_occurrence(day_of_week: int, reference_date: date) -> date:
    """
    Next date on ``day_of_week`` (0=Sunday) on or after ``reference_date``.

    The reference date itself counts when it matches.
    """
    offset = (day_of_week - sunday_based_weekday(reference_date) + 7) % 7
    return reference_date + timedelta(days=offset)


class ScheduleMaterializer:
    """
    Materialize-or-fetch schedule instances from templates.

    Usage:
        >>> materializer = ScheduleMaterializer(registry, schedule_repo)
        >>> result = materializer.materialize("tmpl-1", date(2026, 10, 23))
        >>> result.instance.id
    """

    def __init__(
        self,
        registry: DefaultScheduleRegistry,
        schedule_repo: ScheduleRepository,
    ) -> None:
        self._registry = registry
        self._schedule_repo = schedule_repo

    def materialize(
        self,
        default_schedule_id: str,
        on_date: Optional[date] = None,
        *,
        today: Optional[date] = None,
    ) -> MaterializeResult:
        """
        Get or create the instance for a template on a date.

        Args:
            default_schedule_id: Template to materialize
            on_date: Target date; defaults to the template's next occurrence
            today: Reference date for the next occurrence (defaults to today)

        Returns:
            Created when this call inserted the instance, AlreadyExists otherwise

        Raises:
            DefaultScheduleNotFoundError: No such template
            DayOfWeekMismatchError: on_date is not on the template's weekday
            StorageError: Insert lost a race but the winner cannot be read back
        """
        template = self._registry.get(default_schedule_id)

        if on_date is None:
            on_date = next_occurrence(template.day_of_week, today or date.today())

        requested_day = sunday_based_weekday(on_date)
        if requested_day != template.day_of_week:
            raise DayOfWeekMismatchError(requested_day, template.day_of_week)

        existing = self._find_existing(template, on_date)
        if existing is not None:
            return AlreadyExists(instance=existing)

        try:
            row = self._schedule_repo.create(
                {
                    "date": on_date.isoformat(),
                    "time": template.time,
                    "capacity": template.capacity,
                    "workout_type": template.workout_type.value,
                    "coach_id": template.coach_id,
                    "default_schedule_id": template.id,
                }
            )
        except DuplicateScheduleError:
            winner = self._find_existing(template, on_date)
            if winner is None:
                raise StorageError(
                    f"Schedule for template {template.id} on {on_date} conflicted but could not be read back"
                )
            logger.info(
                f"Materialization race for template {template.id} on {on_date}; "
                f"returning existing schedule {winner.id}"
            )
            return AlreadyExists(instance=winner)

        instance = ScheduleInstance.model_validate(row)
        logger.info(
            f"Materialized schedule {instance.id} from template {template.id} "
            f"for {on_date} {template.time}"
        )
        return Created(instance=instance)

    def _find_existing(
        self,
        template: DefaultSchedule,
        on_date: date,
    ) -> Optional[ScheduleInstance]:
        row = self._schedule_repo.find_by_template_and_date(template.id, on_date)
        if row is None:
            # An ad-hoc instance may already occupy the slot
            row = self._schedule_repo.find_by_date_and_time(on_date, template.time)
        return ScheduleInstance.model_validate(row) if row else None
