"""
Supabase implementation of MemberProfileRepository.

Reads the ``users`` table owned by the profile collaborator.
"""

from typing import Any, Dict, List, Optional

from supabase import Client

PROFILE_COLUMNS = "id, first_name, last_name, max_bench, max_ohp, max_squat, max_deadlift"


class SupabaseMemberProfileRepository:
    """Read-only member profile lookups."""

    def __init__(self, client: Client):
        self._client = client

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table("users")
            .select(PROFILE_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def get_many(self, user_ids: List[str]) -> List[Dict[str, Any]]:
        if not user_ids:
            return []
        response = (
            self._client.table("users")
            .select(PROFILE_COLUMNS)
            .in_("id", user_ids)
            .execute()
        )
        return response.data
