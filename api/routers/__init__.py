"""
Router package for the Fitness Journal API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- calendar: Per-day journal query, append and removal
- programs: Program templates, choice, exercise lookup and completion
- daily_workouts: The user's daily workout plan
"""

from api.routers.calendar import router as calendar_router
from api.routers.daily_workouts import router as daily_workouts_router
from api.routers.health import router as health_router
from api.routers.programs import router as programs_router

__all__ = [
    "health_router",
    "calendar_router",
    "programs_router",
    "daily_workouts_router",
]
