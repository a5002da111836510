"""
Sales Goals Backend - Main Application Entry Point
"""
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from salesgoals.api.router import api_router
from salesgoals.core.config import settings
from salesgoals.core.constants import DEFAULT_VERSION
from salesgoals.core.errors import (
    generic_exception_handler,
    goal_engine_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from salesgoals.core.exceptions import GoalEngineError
from salesgoals.core.logging import setup_logging

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Sales Goals Backend",
    description="Daily sales goal allocation, recalculation and projection",
    version=settings.VERSION or DEFAULT_VERSION
)

# Configure CORS - must be before other middleware
allowed_origins = settings.get_allowed_origins_list()
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allowed_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
# Starlette base class so unmatched routes share the envelope
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(GoalEngineError, goal_engine_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include all API routes under /api/v1
app.include_router(api_router, prefix="/api/v1")

logger.info(
    "Sales Goals Backend ready: env=%s, origins=%s, locale=%s",
    settings.APP_ENV, allowed_origins, settings.WEEKDAY_LOCALE
)
