"""
Version and metadata endpoint
"""
from fastapi import APIRouter, Depends
from salesgoals.core.config import Settings
from salesgoals.core.constants import DEFAULT_VERSION, SERVICE_NAME
from salesgoals.core.deps import get_settings

router = APIRouter()


@router.get("/version")
async def get_version(app_settings: Settings = Depends(get_settings)):
    """
    Get application version and metadata

    Returns:
        Service name, version, environment and weekday locale
    """
    return {
        "service": SERVICE_NAME,
        "version": app_settings.VERSION or DEFAULT_VERSION,
        "env": app_settings.APP_ENV,
        "locale": app_settings.WEEKDAY_LOCALE,
    }
