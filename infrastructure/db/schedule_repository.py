"""
Supabase implementation of ScheduleRepository.

Queries against the ``schedules`` and ``bookings`` tables. Atomicity relies
on the database (see supabase/migrations):
- unique indexes on schedules (default_schedule_id, date) and (date, time)
- unique index on bookings (schedule_id, user_id)
- book_schedule_slot / cancel_schedule_booking functions, which lock the
  schedule row before checking capacity and adjusting the counter
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import (
    AlreadyBookedError,
    CapacityExceededError,
    DuplicateScheduleError,
    NotBookedError,
    ScheduleNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

SCHEDULE_COLUMNS = "*, bookings(id, schedule_id, user_id, workout_type)"


class SupabaseScheduleRepository:
    """
    Supabase-backed schedule instance and booking repository.

    Queries against:
    - schedules: Dated class instances
    - bookings: Member seats within instances
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    # -------------------------------------------------------------------------
    # Instances
    # -------------------------------------------------------------------------

    def list_between(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        query = self._client.table("schedules").select(SCHEDULE_COLUMNS)
        if start_date is not None:
            query = query.gte("date", start_date.isoformat())
        if end_date is not None:
            query = query.lte("date", end_date.isoformat())
        response = query.order("date").order("time").execute()
        return response.data

    def get_by_id(self, schedule_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("schedules")
            .select(SCHEDULE_COLUMNS)
            .eq("id", schedule_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def find_by_template_and_date(
        self,
        default_schedule_id: str,
        schedule_date: date,
    ) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("schedules")
            .select(SCHEDULE_COLUMNS)
            .eq("default_schedule_id", default_schedule_id)
            .eq("date", schedule_date.isoformat())
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def find_by_date_and_time(
        self,
        schedule_date: date,
        time: str,
    ) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("schedules")
            .select(SCHEDULE_COLUMNS)
            .eq("date", schedule_date.isoformat())
            .eq("time", time)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new instance.

        Raises:
            DuplicateScheduleError: unique index violation (race lost)
            StorageError: any other database failure
        """
        try:
            response = (
                self._client.table("schedules")
                .insert({**data, "current_participants": 0})
                .execute()
            )
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateScheduleError(
                    f"Schedule already exists for {data.get('date')} {data.get('time')}"
                ) from e
            logger.exception(f"Failed to create schedule: {e}")
            raise StorageError(f"Failed to create schedule: {e.message}") from e

        return {**response.data[0], "bookings": []}

    def delete(self, schedule_id: str) -> bool:
        """
        Delete an instance.

        Cascades to bookings via FK constraint.
        """
        response = (
            self._client.table("schedules")
            .delete()
            .eq("id", schedule_id)
            .execute()
        )
        return len(response.data) > 0

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
        Book a seat through the book_schedule_slot function.

        The function returns {"status": ..., "booking": {...}}.
        """
        result = self._call(
            "book_schedule_slot",
            {
                "p_schedule_id": schedule_id,
                "p_user_id": user_id,
                "p_workout_type": workout_type,
            },
        )
        status = result.get("status")

        if status == "booked":
            return result["booking"]
        if status == "not_found":
            raise ScheduleNotFoundError(schedule_id)
        if status == "already_booked":
            raise AlreadyBookedError(schedule_id, user_id)
        if status == "full":
            raise CapacityExceededError(schedule_id, result.get("capacity"))
        raise StorageError(f"Unexpected booking status: {status}")

    def cancel(self, schedule_id: str, user_id: str) -> None:
        result = self._call(
            "cancel_schedule_booking",
            {"p_schedule_id": schedule_id, "p_user_id": user_id},
        )
        status = result.get("status")

        if status == "cancelled":
            return
        if status == "not_found":
            raise ScheduleNotFoundError(schedule_id)
        if status == "not_booked":
            raise NotBookedError(schedule_id, user_id)
        raise StorageError(f"Unexpected cancellation status: {status}")

    def _call(self, function: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._client.rpc(function, params).execute()
        except APIError as e:
            logger.exception(f"RPC {function} failed: {e}")
            raise StorageError(f"{function} failed: {e.message}") from e

        if response.data is None:
            raise StorageError(f"{function} returned no data")
        return response.data
