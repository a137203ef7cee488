"""Logging configuration."""

import logging
import sys
from typing import Optional

from psx_spotter.config.settings import Settings, get_settings

# Third-party loggers and the level they run at by default
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
}


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure application logging.

    The root logger writes to stdout at ``log_level``. uvicorn's per-request
    access lines are suppressed unless ``access_log`` is set, and
    ``log_levels`` overrides individual loggers (ledger, snapshot engine, ...).
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=_level(settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
    if settings.access_log:
        logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    for name, level in settings.log_levels.items():
        logging.getLogger(name).setLevel(_level(level))
