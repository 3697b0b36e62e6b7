"""
User Profile Repository Interface (Port).

Read-only view of the user-profile collaborator: names and one-rep maxes.
"""
from typing import Any, Dict, List, Optional, Protocol


class MemberProfileRepository(Protocol):
    """
    Abstract interface for member profile lookups.

    Profile dictionaries carry id, first_name, last_name and the nullable
    max_bench, max_ohp, max_squat, max_deadlift columns.
    """

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a member profile, or None if the user does not exist."""
        ...

    def get_many(self, user_ids: List[str]) -> List[Dict[str, Any]]:
        """Get the profiles for several users; unknown ids are skipped."""
        ...
