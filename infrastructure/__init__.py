"""
Infrastructure Layer for the class scheduling service.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseDefaultScheduleRepository,
    SupabaseMemberProfileRepository,
    SupabaseScheduleRepository,
    SupabaseSupplementalWorkoutRepository,
)

__all__ = [
    "SupabaseDefaultScheduleRepository",
    "SupabaseScheduleRepository",
    "SupabaseMemberProfileRepository",
    "SupabaseSupplementalWorkoutRepository",
]
