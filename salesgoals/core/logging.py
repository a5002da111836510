"""
Logging configuration for the Sales Goals Backend
"""
import logging
import sys
from typing import Optional

from salesgoals.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Engine services log per-day detail at DEBUG; keep them under one namespace
ENGINE_LOGGER = "salesgoals.services"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure stdout logging for the service

    Args:
        level: Overrides settings.LOG_LEVEL (e.g. "DEBUG" while tracing a
            recalculation)
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(ENGINE_LOGGER).setLevel(log_level)

    # Third-party noise
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, env=%s, locale=%s",
        level_name, settings.APP_ENV, settings.WEEKDAY_LOCALE,
    )
