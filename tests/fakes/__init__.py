"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- The schedule fake is thread-safe, mirroring the database guarantees
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeScheduleRepository, create_weekly_templates

    repo = FakeScheduleRepository()
    repo.seed_schedules([{"id": "s1", "date": "2026-10-19", "time": "09:00",
                          "workout_type": "UPPER"}])
"""
from typing import Any, Dict, List

from tests.fakes.member_repository import (
    FakeMemberProfileRepository,
    FakeSupplementalWorkoutRepository,
)
from tests.fakes.schedule_repository import (
    FakeDefaultScheduleRepository,
    FakeScheduleRepository,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_weekly_templates(
    *,
    coach_id: str = "coach-1",
    time: str = "16:00",
    capacity: int = 8,
) -> FakeDefaultScheduleRepository:
    """
    Create a template repository with one class per weekday, Monday to Saturday.

    Template ids are ``tmpl-<day_of_week>`` (0=Sunday). Odd days are UPPER,
    even days LOWER, mirroring the program split.
    """
    repo = FakeDefaultScheduleRepository()
    repo.seed([
        {
            "id": f"tmpl-{day}",
            "day_of_week": day,
            "time": time,
            "capacity": capacity,
            "workout_type": "UPPER" if day % 2 == 1 else "LOWER",
            "coach_id": coach_id,
            "is_active": True,
        }
        for day in range(1, 7)
    ])
    return repo


def sample_supplemental_workouts() -> List[Dict[str, Any]]:
    """Two featured circuits plus two rotating extras per category."""
    return [
        {"id": "sw-1", "name": "Upper Body Complete Circuit", "category": "UPPER",
         "body_part": "Full upper", "exercises": [{"id": "ex-1", "name": "Push-up"}]},
        {"id": "sw-2", "name": "Arm Finisher", "category": "UPPER", "body_part": "Arms",
         "exercises": []},
        {"id": "sw-3", "name": "Shoulder Health", "category": "UPPER", "body_part": "Shoulders",
         "exercises": []},
        {"id": "sw-4", "name": "Leg Circuit Complex", "category": "LOWER",
         "body_part": "Legs", "exercises": [{"id": "ex-2", "name": "Walking lunge"}]},
        {"id": "sw-5", "name": "Hamstring Builder", "category": "LOWER",
         "body_part": "Hamstrings", "exercises": []},
        {"id": "sw-6", "name": "Calf Raises", "category": "LOWER", "body_part": "Calves",
         "exercises": []},
    ]


__all__ = [
    "FakeDefaultScheduleRepository",
    "FakeScheduleRepository",
    "FakeMemberProfileRepository",
    "FakeSupplementalWorkoutRepository",
    "create_weekly_templates",
    "sample_supplemental_workouts",
]
