"""
Enumerations shared across the scheduling domain.
"""

from enum import Enum


class WorkoutType(str, Enum):
    """Body split trained in a class."""

    UPPER = "UPPER"
    LOWER = "LOWER"


class LiftType(str, Enum):
    """Main barbell lifts tracked as one-rep maxes."""

    BENCH = "BENCH"
    OHP = "OHP"
    SQUAT = "SQUAT"
    DEADLIFT = "DEADLIFT"


class Role(str, Enum):
    """Roles supplied by the auth collaborator."""

    USER = "USER"
    COACH = "COACH"
    ADMIN = "ADMIN"


# Lifts programmed for each split, in display order
LIFTS_BY_WORKOUT_TYPE = {
    WorkoutType.UPPER: (LiftType.BENCH, LiftType.OHP),
    WorkoutType.LOWER: (LiftType.SQUAT, LiftType.DEADLIFT),
}
