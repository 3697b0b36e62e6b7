"""
Supabase implementation of DefaultScheduleRepository.

Queries against the ``default_schedules`` table.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

logger = logging.getLogger(__name__)


class SupabaseDefaultScheduleRepository:
    """Supabase-backed recurring template repository."""

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def list(self, *, include_inactive: bool = False) -> List[Dict[str, Any]]:
        query = self._client.table("default_schedules").select("*")
        if not include_inactive:
            query = query.eq("is_active", True)
        response = query.order("day_of_week").order("time").execute()
        return response.data

    def get_by_id(self, default_schedule_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("default_schedules")
            .select("*")
            .eq("id", default_schedule_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def upsert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or update a template.

        Without an id the database generates one on insert.
        """
        response = (
            self._client.table("default_schedules")
            .upsert(data, on_conflict="id")
            .execute()
        )
        return response.data[0]

    def delete(self, default_schedule_id: str) -> bool:
        """
        Delete a template.

        schedules.default_schedule_id is ON DELETE SET NULL, so materialized
        instances survive.
        """
        response = (
            self._client.table("default_schedules")
            .delete()
            .eq("id", default_schedule_id)
            .execute()
        )
        return len(response.data) > 0
