"""
LiftWeightLookup use case.

Thin wrapper over the weight calculator for a single lift of the
authenticated member.
"""

import math

from application.exceptions import InvalidLiftTypeError, MaxLiftNotSetError, MemberNotFoundError, ValidationError
from application.ports import MemberProfileRepository
from backend.core.weight_calculator import calculate
from domain.models import LiftType, MemberProfile, ScalarWeight


class LiftWeightLookup:
    def __init__(self, profile_repo: MemberProfileRepository) -> None:
        self._profile_repo = profile_repo

    def calculate(self, user_id: str, lift: str, percentage: float) -> ScalarWeight:
        """
        Weight for ``percentage`` of the member's max on ``lift``.

        Raises:
            InvalidLiftTypeError: lift is not BENCH, OHP, SQUAT or DEADLIFT
            ValidationError: percentage is not a positive finite number
            MemberNotFoundError: Unknown member
            MaxLiftNotSetError: The member has no max for the lift
        """
        try:
            lift_type = LiftType(str(lift).upper())
        except ValueError:
            raise InvalidLiftTypeError("Invalid lift type")
        if not math.isfinite(percentage) or percentage <= 0:
            raise ValidationError("Percentage must be a positive number")

        row = self._profile_repo.get_by_id(user_id)
        if not row:
            raise MemberNotFoundError(user_id)

        max_lift = MemberProfile.from_row(row).max_lifts.for_lift(lift_type)
        if not max_lift:
            raise MaxLiftNotSetError(lift_type.value)

        return ScalarWeight(value=calculate(max_lift, percentage))
