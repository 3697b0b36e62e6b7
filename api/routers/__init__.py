"""
Router package for the scheduling API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- schedules: Dated instances, bookings and the live class view
- default_schedules: Recurring templates and materialization
- workouts: Program scheme and lift weight lookups
"""

from api.routers.health import router as health_router
from api.routers.schedules import router as schedules_router
from api.routers.default_schedules import router as default_schedules_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "schedules_router",
    "default_schedules_router",
    "workouts_router",
]
