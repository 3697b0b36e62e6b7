"""
ClassDetailAssembler use case.

Builds the live "current class" view: the instance, its program scheme and,
for every booked member, one prescribed weight per set for each main lift of
the member's workout type.

The clock is never read here. Callers pass ``as_of`` (and optionally an hour
override), which keeps the assembler deterministic under test.
"""

import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from application.exceptions import InstanceNotFoundError, ScheduleNotFoundError
from application.ports import (
    MemberProfileRepository,
    ScheduleRepository,
    SupplementalWorkoutRepository,
)
from backend.core.scheme_provider import PROGRAM_WEEKS, get_scheme, program_week, week_identifier
from backend.core.supplemental_rotation import select_supplementals
from backend.core.weight_calculator import calculate_per_set
from domain.models import (
    LIFTS_BY_WORKOUT_TYPE,
    ClassDetailView,
    LiftPrescription,
    MemberProfile,
    ParticipantView,
    PerSetWeight,
    ScheduleInstance,
    SupplementalWorkout,
    UnavailableWeight,
    WorkoutScheme,
)

logger = logging.getLogger(__name__)


class ClassDetailAssembler:
    """
    Compose a schedule instance's roster with computed weights.

    Usage:
        >>> assembler = ClassDetailAssembler(schedule_repo, profile_repo)
        >>> view = assembler.assemble_current(as_of=datetime(2026, 10, 19, 16, 5))
        >>> view.participants[0].lifts[0].weight
        PerSetWeight(kind='per_set', values=[...])
    """

    def __init__(
        self,
        schedule_repo: ScheduleRepository,
        profile_repo: MemberProfileRepository,
        supplemental_repo: Optional[SupplementalWorkoutRepository] = None,
        *,
        program_start_date: Optional[date] = None,
        program_weeks: int = PROGRAM_WEEKS,
    ) -> None:
        self._schedule_repo = schedule_repo
        self._profile_repo = profile_repo
        self._supplemental_repo = supplemental_repo
        self._program_start_date = program_start_date
        self._program_weeks = program_weeks

    def assemble(self, schedule_id: str, as_of: Optional[datetime] = None) -> ClassDetailView:
        """
        Assemble the view for a specific instance.

        Raises:
            ScheduleNotFoundError: No such instance
        """
        row = self._schedule_repo.get_by_id(schedule_id)
        if not row:
            raise ScheduleNotFoundError(schedule_id)
        instance = ScheduleInstance.model_validate(row)
        return self._build(instance, (as_of.date() if as_of else instance.date))

    def assemble_current(self, as_of: datetime, hour: Optional[int] = None) -> ClassDetailView:
        """
        Assemble the view for the class in session at ``as_of``.

        With an explicit ``hour`` only that hour of the ``as_of`` day is
        considered. Without one, the class at the current hour wins and
        otherwise the next class later the same day.

        Raises:
            InstanceNotFoundError: No class in session (an expected outcome)
        """
        today = as_of.date()
        instances = [
            ScheduleInstance.model_validate(row)
            for row in self._schedule_repo.list_between(today, today)
        ]
        target_hour = as_of.hour if hour is None else hour

        instance = _at_hour(instances, target_hour)
        if instance is None and hour is None:
            instance = _next_after(instances, target_hour)

        if instance is None:
            logger.info(f"No class in session on {today} at {target_hour:02d}:00")
            raise InstanceNotFoundError()

        return self._build(instance, today)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _build(self, instance: ScheduleInstance, as_of: date) -> ClassDetailView:
        week = program_week(as_of, self._program_start_date, self._program_weeks)
        scheme = get_scheme(week, instance.date.isoweekday())

        user_ids = [b.user_id for b in instance.bookings]
        profiles: Dict[str, MemberProfile] = {
            row["id"]: MemberProfile.from_row(row)
            for row in (self._profile_repo.get_many(user_ids) if user_ids else [])
        }

        participants: List[ParticipantView] = []
        for booking in instance.bookings:
            profile = profiles.get(booking.user_id)
            if profile is None:
                logger.warning(
                    f"Booking {booking.id} references unknown user {booking.user_id}"
                )
                profile = MemberProfile(id=booking.user_id)
            workout_type = booking.workout_type or instance.workout_type
            participants.append(
                ParticipantView(
                    user_id=profile.id,
                    first_name=profile.first_name,
                    last_initial=profile.last_initial,
                    workout_type=workout_type,
                    lifts=_prescribe(profile, workout_type, scheme),
                )
            )

        return ClassDetailView(
            schedule_id=instance.id,
            date=instance.date,
            time=instance.time,
            workout_type=instance.workout_type,
            week=week,
            scheme=scheme,
            participants=participants,
            supplemental_workouts=self._supplementals(as_of),
        )

    def _supplementals(self, as_of: date) -> List[SupplementalWorkout]:
        if self._supplemental_repo is None:
            return []
        workouts = [
            SupplementalWorkout.model_validate(row)
            for row in self._supplemental_repo.list_all()
        ]
        return select_supplementals(workouts, week_identifier(as_of))


def _prescribe(profile: MemberProfile, workout_type, scheme: WorkoutScheme) -> List[LiftPrescription]:
    lifts = []
    for lift in LIFTS_BY_WORKOUT_TYPE[workout_type]:
        weights = calculate_per_set(profile.max_lifts.for_lift(lift), scheme.percentages)
        weight = UnavailableWeight() if weights is None else PerSetWeight(values=weights)
        lifts.append(LiftPrescription(lift=lift, weight=weight))
    return lifts


def _at_hour(instances: List[ScheduleInstance], hour: int) -> Optional[ScheduleInstance]:
    for instance in instances:
        if instance.hour == hour:
            return instance
    return None


def _next_after(instances: List[ScheduleInstance], hour: int) -> Optional[ScheduleInstance]:
    later = [i for i in instances if i.hour > hour]
    return min(later, key=lambda i: i.time) if later else None
