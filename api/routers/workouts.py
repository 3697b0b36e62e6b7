"""
Workouts router.

Program scheme lookup and single-lift weight calculation.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_lift_weight_lookup
from api.schemas import LiftWeightResponse
from application.use_cases import LiftWeightLookup
from backend.auth import AuthenticatedUser
from backend.core.scheme_provider import get_scheme
from domain.models import WorkoutScheme, WorkoutType

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("/scheme", response_model=WorkoutScheme)
def get_workout_scheme(
    week: int = Query(..., description="Program week, 1-8"),
    day: int = Query(..., description="ISO day of week, 1 (Monday) - 7 (Sunday)"),
    lift_type: Optional[WorkoutType] = Query(None, alias="liftType"),
) -> WorkoutScheme:
    """
    Sets, reps, percentages and rest for a program week and day.

    Weekend days use Monday's prescription. ``liftType`` overrides the
    day's split.
    """
    return get_scheme(week, day, lift_type)


@router.get("/calculate", response_model=LiftWeightResponse)
def calculate_lift_weight(
    lift_type: str = Query(..., alias="liftType", description="BENCH, OHP, SQUAT or DEADLIFT"),
    percentage: float = Query(..., description="Percentage of max, e.g. 75"),
    user: AuthenticatedUser = Depends(get_current_user),
    lookup: LiftWeightLookup = Depends(get_lift_weight_lookup),
) -> LiftWeightResponse:
    """Working weight for a percentage of the caller's one-rep max."""
    weight = lookup.calculate(user.user_id, lift_type, percentage)
    return LiftWeightResponse(
        lift_type=lift_type.upper(),
        percentage=percentage,
        weight=weight.value,
    )
