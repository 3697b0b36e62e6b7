"""
Supabase implementation of SupplementalWorkoutRepository.
"""

from typing import Any, Dict, List

from supabase import Client


class SupabaseSupplementalWorkoutRepository:
    """Reads ``supplemental_workouts`` with their nested ``exercises``."""

    def __init__(self, client: Client):
        self._client = client

    def list_all(self) -> List[Dict[str, Any]]:
        response = (
            self._client.table("supplemental_workouts")
            .select("id, name, category, body_part, description, exercises(id, name, description)")
            .order("id")
            .execute()
        )
        return response.data
