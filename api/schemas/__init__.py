"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- scheduling: Schedule, booking, template and workout lookup models
"""

from api.schemas.scheduling import (
    AddUserToClassRequest,
    BookingResponse,
    BookScheduleRequest,
    CreateFromDefaultRequest,
    CreateScheduleRequest,
    DefaultScheduleListResponse,
    DefaultScheduleResponse,
    DefaultScheduleUpsertRequest,
    LiftWeightResponse,
    MessageResponse,
    ScheduleListResponse,
    ScheduleResponse,
)

__all__ = [
    "AddUserToClassRequest",
    "BookingResponse",
    "BookScheduleRequest",
    "CreateFromDefaultRequest",
    "CreateScheduleRequest",
    "DefaultScheduleListResponse",
    "DefaultScheduleResponse",
    "DefaultScheduleUpsertRequest",
    "LiftWeightResponse",
    "MessageResponse",
    "ScheduleListResponse",
    "ScheduleResponse",
]
