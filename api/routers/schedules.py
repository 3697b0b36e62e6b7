"""
Schedules router.

Dated class instances and the bookings inside them:
- Listing by date or date range
- Ad-hoc creation and deletion (coach/admin)
- Booking and cancellation (members)
- Booking on behalf of a member (admin)
- Live class view with per-participant weights
"""

import logging
import datetime as dt
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status

from api.deps import (
    get_booking_manager,
    get_class_detail_assembler,
    get_current_user,
    get_now,
    get_schedule_catalog,
    require_admin,
    require_staff,
)
from api.schemas import (
    AddUserToClassRequest,
    BookingResponse,
    BookScheduleRequest,
    CreateScheduleRequest,
    MessageResponse,
    ScheduleListResponse,
    ScheduleResponse,
)
from application.use_cases import BookingManager, ClassDetailAssembler, ScheduleCatalog
from backend.auth import AuthenticatedUser
from domain.models import ClassDetailView

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/schedules",
    tags=["Schedules"],
)


# =============================================================================
# Instances
# =============================================================================


@router.get("", response_model=ScheduleListResponse)
def list_schedules(
    date: Optional[dt.date] = Query(None, description="Single date filter"),
    start: Optional[dt.date] = Query(None, description="Range start (inclusive)"),
    end: Optional[dt.date] = Query(None, description="Range end (inclusive)"),
    catalog: ScheduleCatalog = Depends(get_schedule_catalog),
) -> ScheduleListResponse:
    """
    List schedule instances ordered by date then time, bookings embedded.
    """
    schedules = catalog.list(on_date=date, start_date=start, end_date=end)
    return ScheduleListResponse(schedules=schedules, count=len(schedules))


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(
    request: CreateScheduleRequest,
    user: AuthenticatedUser = Depends(require_staff),
    catalog: ScheduleCatalog = Depends(get_schedule_catalog),
) -> ScheduleResponse:
    """Create an ad-hoc instance; the acting coach runs it."""
    schedule = catalog.create_adhoc(
        acting_user_id=user.user_id,
        on_date=request.date,
        time=request.time,
        workout_type=request.workout_type,
        capacity=request.capacity,
    )
    return ScheduleResponse(message="Schedule created successfully", schedule=schedule)


@router.get("/class", response_model=ClassDetailView)
def get_current_class(
    hour: Optional[int] = Query(None, ge=0, le=23, description="Override the current hour"),
    now: dt.datetime = Depends(get_now),
    assembler: ClassDetailAssembler = Depends(get_class_detail_assembler),
) -> ClassDetailView:
    """
    Live view of the class in session.

    Without ``hour`` the class at the current hour is returned, or else the
    next class later today. Returns 404 when nothing is scheduled.
    """
    return assembler.assemble_current(as_of=now, hour=hour)


@router.delete("/{schedule_id}", response_model=MessageResponse)
def delete_schedule(
    schedule_id: str,
    user: AuthenticatedUser = Depends(require_staff),
    catalog: ScheduleCatalog = Depends(get_schedule_catalog),
) -> MessageResponse:
    """Delete an instance together with its bookings."""
    catalog.delete(schedule_id)
    logger.info(f"Schedule {schedule_id} deleted by {user.user_id}")
    return MessageResponse(message="Schedule deleted successfully")


# =============================================================================
# Bookings
# =============================================================================


@router.post(
    "/{schedule_id}/book",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
def book_schedule(
    schedule_id: str,
    request: Optional[BookScheduleRequest] = Body(None),
    user: AuthenticatedUser = Depends(get_current_user),
    manager: BookingManager = Depends(get_booking_manager),
) -> BookingResponse:
    """
    Book the current member into a class.

    On Friday and Saturday the body must carry ``workoutType``; otherwise a
    400 with ``requires_workout_type: true`` is returned.
    """
    workout_type = request.workout_type if request else None
    booking = manager.book(schedule_id, user.user_id, workout_type)
    return BookingResponse(message="Class booked successfully", booking=booking)


@router.delete("/{schedule_id}/book", response_model=MessageResponse)
def cancel_booking(
    schedule_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    manager: BookingManager = Depends(get_booking_manager),
) -> MessageResponse:
    manager.cancel(schedule_id, user.user_id)
    return MessageResponse(message="Booking cancelled successfully")


@router.post(
    "/admin/add-user",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_user_to_class(
    request: AddUserToClassRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    manager: BookingManager = Depends(get_booking_manager),
) -> BookingResponse:
    """Book a member into a class on their behalf."""
    booking = manager.add_member(request.schedule_id, request.user_id, request.workout_type)
    logger.info(
        f"Admin {admin.user_id} added user {request.user_id} to schedule {request.schedule_id}"
    )
    return BookingResponse(message="User added to class successfully", booking=booking)
