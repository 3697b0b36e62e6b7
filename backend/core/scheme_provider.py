"""
Program scheme lookup.

The lifting program runs in 8-week cycles. Every week has a single
rep/percentage prescription; the day of the week only decides whether the
session is an upper- or lower-body day. Days use the ISO convention
(1 = Monday ... 7 = Sunday).
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Optional

from application.exceptions import InvalidDayError, InvalidWeekError
from domain.models import WorkoutScheme, WorkoutType

PROGRAM_WEEKS = 8

# Weekend days fall back to the Monday session
WEEKEND_FALLBACK_DAY = 1
LAST_TRAINING_DAY = 5


@dataclass(frozen=True)
class _WeekPrescription:
    sets: List[int]
    reps: List[int]
    percentages: List[float]
    rest_time_seconds: int


_PROGRAM: Dict[int, _WeekPrescription] = {
    1: _WeekPrescription([1] * 5, [1, 1, 1, 1, 1], [95, 100, 105, 105, 105], 60),
    2: _WeekPrescription([1] * 5, [10, 10, 10, 10, 10], [50, 55, 60, 60, 60], 120),
    3: _WeekPrescription([1] * 5, [10, 8, 6, 4, 2], [55, 65, 75, 85, 95], 60),
    4: _WeekPrescription([1] * 10, [10] * 10, [55] * 10, 120),
    5: _WeekPrescription([1] * 5, [5, 5, 5, 5, 5], [65, 75, 85, 85, 85], 60),
    6: _WeekPrescription([1] * 5, [20, 20, 20, 20, 20], [45, 45, 45, 45, 45], 120),
    7: _WeekPrescription([1] * 5, [5, 3, 1, 1, 1], [75, 85, 95, 95, 95], 60),
    8: _WeekPrescription([1] * 5, [15, 15, 15, 15, 15], [45, 50, 55, 55, 55], 120),
}


def lift_type_for_day(day_of_week: int) -> WorkoutType:
    """Odd days (Mon, Wed, Fri) are upper body, even days lower body."""
    return WorkoutType.UPPER if day_of_week % 2 == 1 else WorkoutType.LOWER


def get_scheme(
    week: int,
    day_of_week: int,
    lift_type: Optional[WorkoutType] = None,
) -> WorkoutScheme:
    """
    Get the workout scheme for a program week and day.

    Both splits share the week's prescription, so any day can be served
    as UPPER or LOWER.

    Args:
        week: Program week, 1..8
        day_of_week: ISO day, 1 (Monday) .. 7 (Sunday)
        lift_type: Split to return; defaults to the day's split

    Returns:
        WorkoutScheme for the session

    Raises:
        InvalidWeekError: week outside 1..8
        InvalidDayError: day outside 1..7
    """
    if week not in _PROGRAM:
        raise InvalidWeekError(week, PROGRAM_WEEKS)
    if day_of_week < 1 or day_of_week > 7:
        raise InvalidDayError(day_of_week)

    day = WEEKEND_FALLBACK_DAY if day_of_week > LAST_TRAINING_DAY else day_of_week
    prescription = _PROGRAM[week]

    return WorkoutScheme(
        week=week,
        day=day,
        lift_type=lift_type or lift_type_for_day(day),
        sets=list(prescription.sets),
        reps=list(prescription.reps),
        percentages=list(prescription.percentages),
        rest_time_seconds=prescription.rest_time_seconds,
    )


def program_week(
    as_of: dt.date,
    start_date: Optional[dt.date] = None,
    weeks: int = PROGRAM_WEEKS,
) -> int:
    """
    Program week (1-based) that ``as_of`` falls in.

    With a start date the cycle is anchored there; otherwise weeks are counted
    from January 1st of the same year.
    """
    anchor = start_date or dt.date(as_of.year, 1, 1)
    return ((as_of - anchor).days // 7) % weeks + 1


def week_identifier(as_of: dt.date) -> int:
    """Whole weeks between the epoch and the Monday of ``as_of``'s week."""
    monday = as_of - dt.timedelta(days=as_of.weekday())
    return (monday - dt.date(1970, 1, 1)).days // 7
