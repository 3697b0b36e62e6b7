"""
Default schedules router.

Recurring weekly class templates:
- Public listing of active templates
- Template upsert and delete (coach/admin)
- Materialize-or-fetch of a template's instance for a date
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from api.deps import (
    get_current_user,
    get_default_schedule_registry,
    get_now,
    get_optional_user,
    get_schedule_materializer,
    require_staff,
)
from api.schemas import (
    CreateFromDefaultRequest,
    DefaultScheduleListResponse,
    DefaultScheduleResponse,
    DefaultScheduleUpsertRequest,
    MessageResponse,
    ScheduleResponse,
)
from application.use_cases import (
    AlreadyExists,
    DefaultScheduleRegistry,
    ScheduleMaterializer,
)
from backend.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/default-schedules",
    tags=["Default Schedules"],
)


@router.get("", response_model=DefaultScheduleListResponse)
def list_default_schedules(
    include_inactive: bool = Query(False, description="Staff only"),
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    registry: DefaultScheduleRegistry = Depends(get_default_schedule_registry),
) -> DefaultScheduleListResponse:
    """List templates ordered by day of week then time."""
    if include_inactive and (user is None or not user.is_staff):
        raise HTTPException(
            status_code=403,
            detail="Only coaches and admins can list inactive default schedules",
        )
    templates = registry.list(include_inactive=include_inactive)
    return DefaultScheduleListResponse(default_schedules=templates, count=len(templates))


@router.post("/admin", response_model=DefaultScheduleResponse)
def upsert_default_schedule(
    request: DefaultScheduleUpsertRequest,
    response: Response,
    user: AuthenticatedUser = Depends(require_staff),
    registry: DefaultScheduleRegistry = Depends(get_default_schedule_registry),
) -> DefaultScheduleResponse:
    """
    Create a template, or update it when ``id`` is supplied.

    Returns 201 on create and 200 on update. An omitted coach makes the
    acting user the coach.
    """
    template = registry.upsert(
        acting_user_id=user.user_id,
        default_schedule_id=request.id,
        day_of_week=request.day_of_week,
        time=request.time,
        workout_type=request.workout_type,
        capacity=request.capacity,
        coach_id=request.coach_id,
        is_active=request.is_active,
    )
    if request.id:
        message = "Default schedule updated successfully"
    else:
        response.status_code = status.HTTP_201_CREATED
        message = "Default schedule created successfully"
    return DefaultScheduleResponse(message=message, default_schedule=template)


@router.delete("/admin/{default_schedule_id}", response_model=MessageResponse)
def delete_default_schedule(
    default_schedule_id: str,
    user: AuthenticatedUser = Depends(require_staff),
    registry: DefaultScheduleRegistry = Depends(get_default_schedule_registry),
) -> MessageResponse:
    registry.delete(default_schedule_id)
    return MessageResponse(message="Default schedule deleted successfully")


@router.post(
    "/create-schedule",
    response_model=ScheduleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Already materialized; body carries schedule_id"}},
)
def create_schedule_from_default(
    request: CreateFromDefaultRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    now=Depends(get_now),
    materializer: ScheduleMaterializer = Depends(get_schedule_materializer),
):
    """
    Materialize the template's instance for a date, or point at the existing one.

    Every concurrent caller for the same (template, date) ends up with the
    same schedule id: one gets 201, the rest 409 carrying ``schedule_id``.
    """
    result = materializer.materialize(
        request.default_schedule_id,
        request.date,
        today=now.date(),
    )

    if isinstance(result, AlreadyExists):
        logger.info(
            f"User {user.user_id} requested existing schedule {result.instance.id}"
        )
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "error": "Schedule already exists for this date",
                "code": "schedule_exists",
                "schedule_id": result.instance.id,
                "schedule": result.instance.model_dump(mode="json"),
            },
        )

    return ScheduleResponse(message="Schedule created successfully", schedule=result.instance)
