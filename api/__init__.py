"""
API package for the scheduling service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Application exception to HTTP response translation
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_now,
    get_supabase_client,
    get_supabase_client_required,
    get_default_schedule_repo,
    get_schedule_repo,
    get_member_profile_repo,
    get_supplemental_workout_repo,
    get_current_user,
    get_optional_user,
    require_staff,
    require_admin,
)

__all__ = [
    # Settings
    "get_settings",
    "get_now",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_default_schedule_repo",
    "get_schedule_repo",
    "get_member_profile_repo",
    "get_supplemental_workout_repo",
    # Authentication
    "get_current_user",
    "get_optional_user",
    "require_staff",
    "require_admin",
]
