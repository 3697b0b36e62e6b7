"""
Default Schedule Repository Interface (Port).

This module defines the abstract interface for recurring weekly class
templates ("default schedules").
"""
from typing import Any, Dict, List, Optional, Protocol


class DefaultScheduleRepository(Protocol):
    """
    Abstract interface for default schedule persistence.

    All methods work with dictionaries keyed by the ``default_schedules``
    column names (id, day_of_week, time, capacity, workout_type, is_active,
    coach_id).
    """

    def list(self, *, include_inactive: bool = False) -> List[Dict[str, Any]]:
        """
        List templates ordered by (day_of_week, time).

        Args:
            include_inactive: Also return templates with is_active = False

        Returns:
            List of template dictionaries
        """
        ...

    def get_by_id(self, default_schedule_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a template by ID.

        Returns:
            Template dictionary if found, None otherwise
        """
        ...

    def upsert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a template, or update it in place when ``data["id"]`` exists.

        Args:
            data: Template fields; ``id`` is optional

        Returns:
            The stored template dictionary
        """
        ...

    def delete(self, default_schedule_id: str) -> bool:
        """
        Delete a template.

        Materialized instances keep their rows; only the template goes away.

        Returns:
            True if deleted, False if not found
        """
        ...
