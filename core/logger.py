"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.

Features:
- Console logging with Loguru (colored or JSON)
- Standard library logging interception (routes stdlib logging to Loguru)
- Third-party library logger configuration (httpx, uvicorn)

Logs are written to stdout only: no files, no rotation.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger  # type: ignore


VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> {extra}"
)

_configured = False


# =============================================================================
# Standard Library Logging Interception
# =============================================================================


class InterceptHandler(logging.Handler):
    """
    Intercept standard library logging and route to Loguru.

    Uvicorn and httpx log through stdlib logging; this keeps their output in
    the same format as the application's own logs.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where logging call originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging() -> None:
    """Route Python standard library logging through Loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def configure_third_party_loggers() -> None:
    """
    Configure third-party library loggers to reduce noise.
    """
    # Suppress verbose logs from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Uvicorn loggers - keep at INFO for server events
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    # FastAPI/Starlette
    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


def resolve_log_level(log_level: Optional[str], debug: bool) -> str:
    """
    Pick the effective log level.

    LOG_LEVEL takes precedence over the DEBUG flag; unknown names fall back
    to INFO.
    """
    if log_level:
        level = log_level.upper()
        return level if level in VALID_LEVELS else "INFO"
    return "DEBUG" if debug else "INFO"


def format_exception_short(exception: BaseException, context: Optional[str] = None) -> str:
    """
    One-line summary of an exception: ``[context | ]Type: message | (file:line)``.

    The location is the innermost traceback frame, or ``unknown`` for an
    exception that was never raised.

    Example:
        >>> format_exception_short(ValueError("Invalid input"), "Bootstrapping")
        'Bootstrapping | ValueError: Invalid input | (unknown)'
    """
    tb = exception.__traceback__
    while tb is not None and tb.tb_next is not None:
        tb = tb.tb_next
    location = f"{Path(tb.tb_frame.f_code.co_filename).name}:{tb.tb_lineno}" if tb else "unknown"

    summary = f"{type(exception).__name__}: {exception} | ({location})"
    return f"{context} | {summary}" if context else summary


# =============================================================================
# JSON Logging Format
# =============================================================================


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, OverflowError, ValueError):
        return str(value)
    return value


def serialize_log_record(record: dict) -> str:
    """
    Loguru ``format`` callable rendering one flat JSON object per line.

    Bound context (``logger.bind(...)``, or the keyword context given to the
    application logger) is merged into the top level next to the standard
    fields; values JSON cannot encode are stringified.
    """
    payload: Dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    exception = record.get("exception")
    if exception:
        payload["exception"] = {
            "type": exception.type.__name__ if exception.type else "Unknown",
            "message": str(exception.value),
        }

    payload.update({key: _json_safe(value) for key, value in record["extra"].items()})

    # Loguru calls format() on the result and parses "<" as a color tag
    serialized = json.dumps(payload).replace("<", "\\u003c")
    return serialized.replace("{", "{{").replace("}", "}}") + "\n"


def setup_logger(force: bool = False) -> None:
    """
    Configure the console sink for the main application.

    Only configures once unless ``force`` is set. Supports console (colored)
    and JSON formats based on the LOG_FORMAT setting.
    """
    global _configured

    if _configured and not force:
        return

    from .config import get_settings

    settings = get_settings()
    log_level = resolve_log_level(
        settings.log_level, settings.debug or settings.is_development
    )

    logger.remove()

    if settings.log_format.lower() == "json":
        logger.add(
            sys.stdout,
            format=serialize_log_record,
            level=log_level,
            colorize=False,
        )
    else:

        def filter_reloader_logs(record):
            """Filter out logs from __main__ and __mp_main__ (reloader processes)."""
            return record.get("name", "") not in ("__main__", "__mp_main__")

        logger.add(
            sys.stdout,
            colorize=True,
            format=CONSOLE_FORMAT,
            level=log_level,
            filter=filter_reloader_logs,
        )

    intercept_standard_logging()
    configure_third_party_loggers()
    _configured = True
