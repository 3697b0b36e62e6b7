"""
Weekly rotation of supplemental (accessory) workouts.

Every class shows the featured circuit for each category first, followed by
one extra workout per category. The extra rotates every Monday so a whole week
of classes shares the same accessories.
"""

from typing import List

from domain.models import SupplementalWorkout, WorkoutType

FEATURED_CIRCUITS = {
    WorkoutType.UPPER: "Upper Body Complete Circuit",
    WorkoutType.LOWER: "Leg Circuit Complex",
}


def select_supplementals(
    workouts: List[SupplementalWorkout],
    week_id: int,
) -> List[SupplementalWorkout]:
    """
    Pick the supplemental workouts for a week.

    Args:
        workouts: All supplemental workouts, in stable (id) order
        week_id: Week identifier, see scheme_provider.week_identifier

    Returns:
        Featured circuits (upper then lower) followed by one rotating extra
        per category
    """
    featured: List[SupplementalWorkout] = []
    extras: List[SupplementalWorkout] = []

    for category in (WorkoutType.UPPER, WorkoutType.LOWER):
        in_category = [w for w in workouts if w.category == category]
        circuit_name = FEATURED_CIRCUITS[category]

        circuit = next((w for w in in_category if w.name == circuit_name), None)
        if circuit is not None:
            featured.append(circuit)

        remaining = [w for w in in_category if w.name != circuit_name]
        if remaining:
            extras.append(remaining[week_id % len(remaining)])

    return featured + extras
