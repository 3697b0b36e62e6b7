"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseDefaultScheduleRepository,
        SupabaseScheduleRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    template_repo = SupabaseDefaultScheduleRepository(client)
    schedule_repo = SupabaseScheduleRepository(client)
"""

from infrastructure.db.default_schedule_repository import SupabaseDefaultScheduleRepository
from infrastructure.db.schedule_repository import SupabaseScheduleRepository
from infrastructure.db.supplemental_workout_repository import SupabaseSupplementalWorkoutRepository
from infrastructure.db.user_profile_repository import SupabaseMemberProfileRepository

__all__ = [
    "SupabaseDefaultScheduleRepository",
    "SupabaseScheduleRepository",
    "SupabaseMemberProfileRepository",
    "SupabaseSupplementalWorkoutRepository",
]
