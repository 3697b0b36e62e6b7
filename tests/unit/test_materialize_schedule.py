"""
Unit tests for ScheduleMaterializer.

Covers materialize-or-fetch semantics, including callers racing for the same
(template, date).
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from application.exceptions import (
    DayOfWeekMismatchError,
    DefaultScheduleNotFoundError,
    DuplicateScheduleError,
    StorageError,
)
from application.use_cases import (
    AlreadyExists,
    Created,
    DefaultScheduleRegistry,
    ScheduleMaterializer,
    next_occurrence,
)
from domain.models import WorkoutType
from tests.fakes import FakeScheduleRepository, create_weekly_templates

MONDAY = date(2026, 10, 19)
FRIDAY = date(2026, 10, 23)


class RaceLostScheduleRepository(FakeScheduleRepository):
    """Another request inserts the instance between our lookup and our insert."""

    def create(self, data):
        super().create(data)
        raise DuplicateScheduleError("unique violation")


class PhantomConflictScheduleRepository(FakeScheduleRepository):
    """Insert reports a conflict but no winner is readable."""

    def create(self, data):
        raise DuplicateScheduleError("unique violation")


def _materializer(schedule_repo):
    registry = DefaultScheduleRegistry(default_schedule_repo=create_weekly_templates())
    return ScheduleMaterializer(registry, schedule_repo)


@pytest.mark.unit
class TestNextOccurrence:
    def test_same_day_counts(self):
        assert next_occurrence(1, MONDAY) == MONDAY

    def test_later_in_week(self):
        assert next_occurrence(5, MONDAY) == FRIDAY

    def test_wraps_to_next_week(self):
        assert next_occurrence(0, MONDAY) == date(2026, 10, 25)
        assert next_occurrence(1, date(2026, 10, 20)) == date(2026, 10, 26)


@pytest.mark.unit
class TestMaterialize:
    def test_creates_instance_from_template(self):
        repo = FakeScheduleRepository()
        result = _materializer(repo).materialize("tmpl-5", FRIDAY)

        assert isinstance(result, Created)
        assert result.created is True
        instance = result.instance
        assert instance.date == FRIDAY
        assert instance.time == "16:00"
        assert instance.capacity == 8
        assert instance.current_participants == 0
        assert instance.workout_type == WorkoutType.UPPER
        assert instance.coach_id == "coach-1"
        assert instance.default_schedule_id == "tmpl-5"

    def test_second_call_returns_existing(self):
        repo = FakeScheduleRepository()
        materializer = _materializer(repo)
        first = materializer.materialize("tmpl-5", FRIDAY)
        second = materializer.materialize("tmpl-5", FRIDAY)

        assert isinstance(second, AlreadyExists)
        assert second.created is False
        assert second.instance.id == first.instance.id
        assert repo.count() == 1

    def test_defaults_to_next_occurrence(self):
        repo = FakeScheduleRepository()
        result = _materializer(repo).materialize("tmpl-5", today=MONDAY)
        assert result.instance.date == FRIDAY

    def test_date_must_match_template_day(self):
        repo = FakeScheduleRepository()
        with pytest.raises(DayOfWeekMismatchError) as exc_info:
            _materializer(repo).materialize("tmpl-5", MONDAY)

        assert exc_info.value.requested_day == 1
        assert exc_info.value.expected_day == 5
        assert exc_info.value.to_dict()["expected_day"] == 5
        assert repo.count() == 0

    def test_unknown_template(self):
        with pytest.raises(DefaultScheduleNotFoundError):
            _materializer(FakeScheduleRepository()).materialize("missing", FRIDAY)

    def test_existing_adhoc_instance_in_slot_is_returned(self):
        repo = FakeScheduleRepository()
        repo.seed_schedules([{
            "id": "adhoc-1", "date": FRIDAY.isoformat(), "time": "16:00",
            "workout_type": "LOWER", "capacity": 4,
        }])
        result = _materializer(repo).materialize("tmpl-5", FRIDAY)

        assert isinstance(result, AlreadyExists)
        assert result.instance.id == "adhoc-1"
        assert repo.count() == 1

    def test_inactive_template_can_still_be_materialized(self):
        templates = create_weekly_templates()
        templates.upsert({"id": "tmpl-5", "is_active": False})
        materializer = ScheduleMaterializer(
            DefaultScheduleRegistry(default_schedule_repo=templates),
            FakeScheduleRepository(),
        )
        assert isinstance(materializer.materialize("tmpl-5", FRIDAY), Created)

    def test_template_without_coach(self):
        templates = create_weekly_templates()
        templates.upsert({"id": "tmpl-5", "coach_id": None})
        materializer = ScheduleMaterializer(
            DefaultScheduleRegistry(default_schedule_repo=templates),
            FakeScheduleRepository(),
        )
        result = materializer.materialize("tmpl-5", FRIDAY)

        assert isinstance(result, Created)
        assert result.instance.coach_id is None


@pytest.mark.unit
class TestMaterializeRaces:
    def test_lost_race_returns_winner(self):
        repo = RaceLostScheduleRepository()
        result = _materializer(repo).materialize("tmpl-5", FRIDAY)

        assert isinstance(result, AlreadyExists)
        assert result.instance.id == repo.list_between()[0]["id"]
        assert repo.count() == 1

    def test_conflict_without_winner_is_storage_error(self):
        with pytest.raises(StorageError):
            _materializer(PhantomConflictScheduleRepository()).materialize("tmpl-5", FRIDAY)

    def test_concurrent_callers_share_one_instance(self):
        """Twenty simultaneous callers: one Created, the rest AlreadyExists."""
        repo = FakeScheduleRepository()
        materializer = _materializer(repo)

        with ThreadPoolExecutor(max_workers=20) as pool:
            results = list(pool.map(lambda _: materializer.materialize("tmpl-5", FRIDAY), range(20)))

        assert repo.count() == 1
        assert len({r.instance.id for r in results}) == 1
        assert sum(isinstance(r, Created) for r in results) == 1
        assert sum(isinstance(r, AlreadyExists) for r in results) == 19
