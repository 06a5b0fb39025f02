"""Logging setup shared by the gateway and the uvicorn server running it."""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from workout_gateway.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "app.log"

# Server loggers routed through the gateway handlers instead of uvicorn's defaults.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_configured = False


def build_logging_config(log_dir: Path, level: str) -> dict[str, Any]:
    """Return the dictConfig mapping for console + file output under ``log_dir``."""

    handler_names = ["console", "file"]
    loggers: dict[str, dict[str, Any]] = {
        name: {"level": level, "handlers": handler_names, "propagate": False}
        for name in SERVER_LOGGERS
    }
    # httpx logs every upstream request at INFO.
    loggers["httpx"] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_dir / LOG_FILENAME),
                "encoding": "utf-8",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": loggers,
        "root": {"level": level, "handlers": handler_names},
    }


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the gateway logging config; later calls in the same process are no-ops."""

    global _configured
    if _configured:
        return

    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            settings = None

    log_dir = settings.log_dir if settings else Path("logs")
    level = settings.log_level if settings else "INFO"
    log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(build_logging_config(log_dir, level))
    _configured = True
