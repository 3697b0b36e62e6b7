"""
Supplemental Workout Repository Interface (Port).
"""
from typing import Any, Dict, List, Protocol


class SupplementalWorkoutRepository(Protocol):
    """Read access to accessory workouts and their exercises."""

    def list_all(self) -> List[Dict[str, Any]]:
        """
        List every supplemental workout ordered by id.

        Each dictionary has id, name, category (UPPER/LOWER), body_part,
        description and an ``exercises`` list.
        """
        ...
