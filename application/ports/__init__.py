"""
Repository Interfaces (Ports) for the class scheduling service.

This package defines abstract interfaces that decouple scheduling logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ScheduleRepository

    class BookingManager:
        def __init__(self, schedule_repo: ScheduleRepository):
            self._schedule_repo = schedule_repo
"""

from application.ports.default_schedule_repository import DefaultScheduleRepository
from application.ports.schedule_repository import ScheduleRepository
from application.ports.supplemental_workout_repository import SupplementalWorkoutRepository
from application.ports.user_profile_repository import MemberProfileRepository

__all__ = [
    "DefaultScheduleRepository",
    "ScheduleRepository",
    "MemberProfileRepository",
    "SupplementalWorkoutRepository",
]
