"""
Application Use Cases for the class scheduling service.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters. Use cases are the entry points
for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models (or typed results), not API responses
- Failures are raised as the typed exceptions in application.exceptions

Usage:
    from application.use_cases import (
        BookingManager,
        DefaultScheduleRegistry,
        ScheduleMaterializer,
    )

    registry = DefaultScheduleRegistry(default_schedule_repo=template_repo)
    materializer = ScheduleMaterializer(registry, schedule_repo)
    result = materializer.materialize("tmpl-1", date(2026, 10, 23))

    manager = BookingManager(schedule_repo=schedule_repo)
    booking = manager.book(result.instance.id, "user-1", WorkoutType.UPPER)
"""

from application.use_cases.booking_manager import BookingManager
from application.use_cases.class_detail import ClassDetailAssembler
from application.use_cases.default_schedule_registry import DefaultScheduleRegistry
from application.use_cases.lift_weight import LiftWeightLookup
from application.use_cases.materialize_schedule import (
    AlreadyExists,
    Created,
    MaterializeResult,
    ScheduleMaterializer,
    next_occurrence,
)
from application.use_cases.schedule_catalog import ScheduleCatalog

__all__ = [
    # Templates
    "DefaultScheduleRegistry",
    # Materialization
    "ScheduleMaterializer",
    "MaterializeResult",
    "Created",
    "AlreadyExists",
    "next_occurrence",
    # Booking
    "BookingManager",
    # Instances
    "ScheduleCatalog",
    # Class view
    "ClassDetailAssembler",
    # Weights
    "LiftWeightLookup",
]
