"""
Main API router
"""
from fastapi import APIRouter

from salesgoals.api.v1 import (
    health,
    version,
    calendar,
    goals,
    metrics,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(metrics.router, prefix="/metrics", tags=["metrics"])
