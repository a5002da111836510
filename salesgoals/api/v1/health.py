"""
Health check endpoint
"""
from fastapi import APIRouter
from salesgoals.core.constants import SERVICE_NAME

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness probe; the engine has no backing store to check."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
    }
