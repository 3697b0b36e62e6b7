"""
Pytest fixtures shared by the scheduling API tests.

Repositories are swapped for the in-memory fakes in tests.fakes through
app.dependency_overrides; auth is replaced by a mutable test identity.
"""

from datetime import datetime
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_current_user,
    get_default_schedule_repo,
    get_member_profile_repo,
    get_now,
    get_optional_user,
    get_schedule_repo,
    get_supplemental_workout_repo,
)
from backend.auth import AuthenticatedUser
from backend.main import create_app
from backend.settings import Settings
from domain.models import Role
from tests.fakes import (
    FakeDefaultScheduleRepository,
    FakeMemberProfileRepository,
    FakeScheduleRepository,
    FakeSupplementalWorkoutRepository,
    create_weekly_templates,
    sample_supplemental_workouts,
)


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"
COACH_USER_ID = "coach-1"
ADMIN_USER_ID = "admin-1"

# Monday 19 October 2026, 16:05 local time
FROZEN_NOW = datetime(2026, 10, 19, 16, 5)


class AuthState:
    """Identity returned by the overridden auth dependencies."""

    def __init__(self):
        self.user: AuthenticatedUser = AuthenticatedUser(TEST_USER_ID, Role.USER)

    def login(self, user_id: str, role: Role = Role.USER) -> None:
        self.user = AuthenticatedUser(user_id, role)

    def as_user(self) -> None:
        self.login(TEST_USER_ID)

    def as_coach(self) -> None:
        self.login(COACH_USER_ID, Role.COACH)

    def as_admin(self) -> None:
        self.login(ADMIN_USER_ID, Role.ADMIN)


# ---------------------------------------------------------------------------
# Settings and App
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        jwt_secret="test-secret",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


# ---------------------------------------------------------------------------
# Fake Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def template_repo() -> FakeDefaultScheduleRepository:
    return create_weekly_templates()


@pytest.fixture
def schedule_repo() -> FakeScheduleRepository:
    return FakeScheduleRepository()


@pytest.fixture
def profile_repo() -> FakeMemberProfileRepository:
    repo = FakeMemberProfileRepository()
    repo.seed([
        {"id": TEST_USER_ID, "first_name": "Ada", "last_name": "Lovelace",
         "max_bench": 200, "max_ohp": 120, "max_squat": 300, "max_deadlift": 400},
        {"id": OTHER_USER_ID, "first_name": "Grace", "last_name": "Hopper",
         "max_bench": 150},
        {"id": COACH_USER_ID, "first_name": "Carl", "last_name": "Coach"},
    ])
    return repo


@pytest.fixture
def supplemental_repo() -> FakeSupplementalWorkoutRepository:
    return FakeSupplementalWorkoutRepository(sample_supplemental_workouts())


@pytest.fixture
def auth() -> AuthState:
    return AuthState()


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(
    app,
    auth,
    template_repo,
    schedule_repo,
    profile_repo,
    supplemental_repo,
) -> Generator[TestClient, None, None]:
    """
    TestClient wired to the fakes with a frozen clock.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = lambda: auth.user
    app.dependency_overrides[get_optional_user] = lambda: auth.user
    app.dependency_overrides[get_now] = lambda: FROZEN_NOW
    app.dependency_overrides[get_default_schedule_repo] = lambda: template_repo
    app.dependency_overrides[get_schedule_repo] = lambda: schedule_repo
    app.dependency_overrides[get_member_profile_repo] = lambda: profile_repo
    app.dependency_overrides[get_supplemental_workout_repo] = lambda: supplemental_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
