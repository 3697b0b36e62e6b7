"""
Schedule Repository Interface (Port).

This module defines the abstract interface for dated schedule instances and
their bookings. The repository is the serialization boundary for the only
shared mutable state in the service (the participant counter and the booking
set), so the mutating methods below must be atomic in every implementation.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Protocol


class ScheduleRepository(Protocol):
    """
    Abstract interface for schedule instance and booking persistence.

    Schedule dictionaries use the ``schedules`` column names (id, date, time,
    capacity, current_participants, workout_type, coach_id,
    default_schedule_id) and embed their bookings under ``bookings``.
    """

    # -------------------------------------------------------------------------
    # Instances
    # -------------------------------------------------------------------------

    def list_between(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        """
        List instances with start_date <= date <= end_date, ordered by date
        then time. Either bound may be omitted.
        """
        ...

    def get_by_id(self, schedule_id: str) -> Optional[Dict[str, Any]]:
        """Get an instance with its bookings, or None."""
        ...

    def find_by_template_and_date(
        self,
        default_schedule_id: str,
        schedule_date: date,
    ) -> Optional[Dict[str, Any]]:
        """Get the instance materialized from a template on a date, or None."""
        ...

    def find_by_date_and_time(
        self,
        schedule_date: date,
        time: str,
    ) -> Optional[Dict[str, Any]]:
        """Get the instance at an exact date and ``HH:MM`` time, or None."""
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new instance with current_participants = 0.

        Raises:
            DuplicateScheduleError: An instance already exists for
                (default_schedule_id, date). Enforced by the store, not by a
                prior read.
        """
        ...

    def delete(self, schedule_id: str) -> bool:
        """
        Delete an instance and all of its bookings.

        Returns:
            True if deleted, False if not found
        """
        ...

    # -------------------------------------------------------------------------
    # Bookings
    # -------------------------------------------------------------------------

    def book(
        self,
        schedule_id: str,
        user_id: str,
        workout_type: Optional[str],
    ) -> Dict[str, Any]:
        """
        Atomically add a booking and increment current_participants.

        The capacity check, uniqueness check and increment happen in one
        serialized step, so the last seat can never be granted twice.

        Returns:
            The created booking dictionary

        Raises:
            ScheduleNotFoundError: No such instance
            AlreadyBookedError: A booking exists for (schedule_id, user_id)
            CapacityExceededError: current_participants >= capacity
        """
        ...

    def cancel(self, schedule_id: str, user_id: str) -> None:
        """
        Atomically remove a booking and decrement current_participants.

        Raises:
            ScheduleNotFoundError: No such instance
            NotBookedError: No booking exists for (schedule_id, user_id)
        """
        ...
