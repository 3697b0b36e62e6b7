"""
Unit tests for DefaultScheduleRegistry.
"""

import pytest

from application.exceptions import DefaultScheduleNotFoundError, ValidationError
from application.use_cases import DefaultScheduleRegistry
from domain.models import WorkoutType
from tests.fakes import FakeDefaultScheduleRepository, create_weekly_templates


@pytest.fixture
def repo() -> FakeDefaultScheduleRepository:
    return create_weekly_templates()


@pytest.fixture
def registry(repo) -> DefaultScheduleRegistry:
    return DefaultScheduleRegistry(default_schedule_repo=repo)


@pytest.mark.unit
class TestListAndGet:
    def test_list_is_ordered_by_day_then_time(self, repo, registry):
        repo.seed([{"id": "tmpl-1-early", "day_of_week": 1, "time": "06:00",
                    "workout_type": "UPPER", "coach_id": "coach-1"}])
        templates = registry.list()
        assert [t.id for t in templates[:2]] == ["tmpl-1-early", "tmpl-1"]
        assert [t.day_of_week for t in templates] == sorted(t.day_of_week for t in templates)

    def test_inactive_hidden_by_default(self, repo, registry):
        repo.seed([{"id": "tmpl-off", "day_of_week": 0, "time": "10:00",
                    "workout_type": "LOWER", "coach_id": "coach-1", "is_active": False}])
        assert "tmpl-off" not in [t.id for t in registry.list()]
        assert "tmpl-off" in [t.id for t in registry.list(include_inactive=True)]

    def test_get_unknown(self, registry):
        with pytest.raises(DefaultScheduleNotFoundError):
            registry.get("missing")

    def test_template_without_coach(self, repo, registry):
        """A coach whose user row was deleted leaves coach_id NULL."""
        repo.seed([{"id": "tmpl-orphan", "day_of_week": 0, "time": "10:00",
                    "workout_type": "LOWER", "coach_id": None}])
        template = registry.get("tmpl-orphan")
        assert template.coach_id is None
        assert "tmpl-orphan" in [t.id for t in registry.list()]


@pytest.mark.unit
class TestUpsert:
    def test_create_defaults(self, repo, registry):
        """Capacity 8, active, acting user as coach."""
        template = registry.upsert(
            acting_user_id="admin-1",
            day_of_week=0,
            time="9:00",
            workout_type=WorkoutType.LOWER,
        )
        assert template.time == "09:00"
        assert template.capacity == 8
        assert template.is_active is True
        assert template.coach_id == "admin-1"
        assert repo.count() == 7

    def test_configured_default_capacity(self, repo):
        registry = DefaultScheduleRegistry(default_schedule_repo=repo, default_capacity=12)
        template = registry.upsert(
            acting_user_id="admin-1", day_of_week=0, time="09:00",
            workout_type=WorkoutType.LOWER,
        )
        assert template.capacity == 12

    def test_update_existing(self, repo, registry):
        template = registry.upsert(
            acting_user_id="admin-1",
            default_schedule_id="tmpl-1",
            day_of_week=1,
            time="17:30",
            workout_type=WorkoutType.UPPER,
            capacity=10,
            coach_id="coach-2",
            is_active=False,
        )
        assert template.id == "tmpl-1"
        assert template.time == "17:30"
        assert template.coach_id == "coach-2"
        assert template.is_active is False
        assert repo.count() == 6

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"day_of_week": 7, "time": "09:00"},
            {"day_of_week": -1, "time": "09:00"},
            {"day_of_week": 1, "time": "25:00"},
            {"day_of_week": 1, "time": "9am"},
            {"day_of_week": 1, "time": "09:00", "capacity": 0},
        ],
    )
    def test_rejects_invalid_input(self, repo, registry, kwargs):
        with pytest.raises(ValidationError):
            registry.upsert(acting_user_id="admin-1", workout_type=WorkoutType.UPPER, **kwargs)
        assert repo.count() == 6


@pytest.mark.unit
class TestDelete:
    def test_delete(self, repo, registry):
        registry.delete("tmpl-1")
        assert repo.get_by_id("tmpl-1") is None

    def test_delete_unknown(self, registry):
        with pytest.raises(DefaultScheduleNotFoundError):
            registry.delete("missing")
