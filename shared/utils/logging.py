import logging
import sys
from typing import Any, Dict, Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LOG_LEVEL values accepted by the API config, mapped to stdlib levels
LEVEL_NAMES = {
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def resolve_level(level: str) -> int:
    """Translate a configured level name (e.g. 'warn', 'trace', 'INFO') to a logging level."""
    name = level.lower()
    if name in LEVEL_NAMES:
        return LEVEL_NAMES[name]
    return getattr(logging, level.upper())


def setup_logging(
    level: str = "info",
    format_string: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (fatal, error, warn, info, debug, trace, or a stdlib name)
        format_string: Custom format string (optional)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logging.basicConfig(
        level=resolve_level(level),
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )


def logging_config(level: str = "info", format_string: Optional[str] = None) -> Dict[str, Any]:
    """
    The same setup as setup_logging, as a dictConfig mapping.

    Handed to uvicorn as log_config so every server process (including the
    reload worker) configures logging on its own.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": format_string or DEFAULT_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": resolve_level(level), "handlers": ["stdout"]},
        "loggers": {
            "uvicorn": {"level": resolve_level(level), "handlers": [], "propagate": True},
            "uvicorn.access": {"level": resolve_level(level), "handlers": [], "propagate": True},
        },
    }
