"""
FastAPI Dependency Providers for the scheduling API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use-case providers assemble use cases from repository providers
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_booking_manager, get_current_user

    @router.post("/schedules/{schedule_id}/book")
    def book(
        schedule_id: str,
        user: AuthenticatedUser = Depends(get_current_user),
        manager: BookingManager = Depends(get_booking_manager),
    ):
        return manager.book(schedule_id, user.user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_schedule_repo] = lambda: FakeScheduleRepository()
"""

from datetime import datetime
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    DefaultScheduleRepository,
    MemberProfileRepository,
    ScheduleRepository,
    SupplementalWorkoutRepository,
)

# Use cases
from application.use_cases import (
    BookingManager,
    ClassDetailAssembler,
    DefaultScheduleRegistry,
    LiftWeightLookup,
    ScheduleCatalog,
    ScheduleMaterializer,
)

# Concrete implementations
from infrastructure import (
    SupabaseDefaultScheduleRepository,
    SupabaseMemberProfileRepository,
    SupabaseScheduleRepository,
    SupabaseSupplementalWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    AuthenticatedUser,
    ensure_admin,
    ensure_staff,
    get_current_user as _get_current_user,
    get_optional_user as _get_optional_user,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


def get_now() -> datetime:
    """Current local time; overridden in tests to pin the clock."""
    return datetime.now()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_default_schedule_repo(
    client: Client = Depends(get_supabase_client_required),
) -> DefaultScheduleRepository:
    """
    Get DefaultScheduleRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseDefaultScheduleRepository(client)


def get_schedule_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ScheduleRepository:
    """Get ScheduleRepository implementation (instances and bookings)."""
    return SupabaseScheduleRepository(client)


def get_member_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> MemberProfileRepository:
    """Get MemberProfileRepository implementation."""
    return SupabaseMemberProfileRepository(client)


def get_supplemental_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SupplementalWorkoutRepository:
    return SupabaseSupplementalWorkoutRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_default_schedule_registry(
    repo: DefaultScheduleRepository = Depends(get_default_schedule_repo),
    settings: Settings = Depends(get_settings),
) -> DefaultScheduleRegistry:
    return DefaultScheduleRegistry(
        default_schedule_repo=repo,
        default_capacity=settings.default_class_capacity,
    )


def get_schedule_materializer(
    registry: DefaultScheduleRegistry = Depends(get_default_schedule_registry),
    schedule_repo: ScheduleRepository = Depends(get_schedule_repo),
) -> ScheduleMaterializer:
    return ScheduleMaterializer(registry, schedule_repo)


def get_booking_manager(
    schedule_repo: ScheduleRepository = Depends(get_schedule_repo),
    profile_repo: MemberProfileRepository = Depends(get_member_profile_repo),
    materializer: ScheduleMaterializer = Depends(get_schedule_materializer),
) -> BookingManager:
    return BookingManager(
        schedule_repo=schedule_repo,
        profile_repo=profile_repo,
        materializer=materializer,
    )


def get_schedule_catalog(
    schedule_repo: ScheduleRepository = Depends(get_schedule_repo),
    settings: Settings = Depends(get_settings),
) -> ScheduleCatalog:
    return ScheduleCatalog(schedule_repo, default_capacity=settings.default_class_capacity)


def get_class_detail_assembler(
    schedule_repo: ScheduleRepository = Depends(get_schedule_repo),
    profile_repo: MemberProfileRepository = Depends(get_member_profile_repo),
    supplemental_repo: SupplementalWorkoutRepository = Depends(get_supplemental_workout_repo),
    settings: Settings = Depends(get_settings),
) -> ClassDetailAssembler:
    return ClassDetailAssembler(
        schedule_repo,
        profile_repo,
        supplemental_repo,
        program_start_date=settings.program_start_date,
        program_weeks=settings.program_weeks,
    )


def get_lift_weight_lookup(
    profile_repo: MemberProfileRepository = Depends(get_member_profile_repo),
) -> LiftWeightLookup:
    return LiftWeightLookup(profile_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Get the current authenticated user.

    Wraps backend.auth.get_current_user for dependency injection.

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization, settings=settings)


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> Optional[AuthenticatedUser]:
    """Get the current user if authenticated, None otherwise."""
    return await _get_optional_user(authorization=authorization, settings=settings)


async def require_staff(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Current user, required to be a coach or admin (403 otherwise)."""
    return ensure_staff(user)


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Current user, required to be an admin (403 otherwise)."""
    return ensure_admin(user)


# =============================================================================
# Exports
# =============================================================================

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
    # Use cases
    "get_default_schedule_registry",
    "get_schedule_materializer",
    "get_booking_manager",
    "get_schedule_catalog",
    "get_class_detail_assembler",
    "get_lift_weight_lookup",
    # Authentication
    "get_current_user",
    "get_optional_user",
    "require_staff",
    "require_admin",
]
