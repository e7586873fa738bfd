"""Loguru-based structured logging configuration.

Logs are written to the configured file as JSON lines. Errors are also
appended to error.log next to it. Stdlib logging is intercepted and
funneled to loguru. Context vars (chat_id, message_id, method) bound with
contextualize() are promoted to the top level for easy grep/filter.
"""

import json
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .settings import Settings

_configured = False

_CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"

# Context keys promoted to top-level JSON
_CONTEXT_KEYS = ("chat_id", "message_id", "method")


def _serialize_with_context(record) -> str:
    """Format record as JSON with context vars at top level.
    Returns a format template; the JSON is injected into the record.
    """
    extra = record.get("extra", {})
    out = {
        "time": str(record["time"]),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    for key in _CONTEXT_KEYS:
        if key in extra and extra[key] is not None:
            out[key] = extra[key]
    if record["exception"] is not None:
        exc_type = record["exception"].type
        out["exception"] = exc_type.__name__ if exc_type else None
    record["_json"] = json.dumps(out, default=str)
    return "{_json}\n"


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    log_file: str, *, level: str = "DEBUG", console: bool = False, force: bool = False
) -> None:
    """Configure loguru with JSON output to log_file and intercept stdlib logging.

    Idempotent: skips if already configured.
    Use force=True to reconfigure (e.g. in tests with a different log path).
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    # Remove existing handlers (including the default stderr one)
    logger.remove()

    # Start each run with an empty main log
    open(log_file, "w", encoding="utf-8").close()

    logger.add(
        log_file,
        level=level,
        format=_serialize_with_context,
        encoding="utf-8",
        mode="a",
    )

    # error.log is appended to and never truncated
    error_log_file = os.path.join(os.path.dirname(log_file), "error.log")
    logger.add(
        error_log_file,
        level="ERROR",
        format=_serialize_with_context,
        encoding="utf-8",
        mode="a",
    )

    if console:
        logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)

    # Route all root logger output to loguru
    intercept = InterceptHandler()
    logging.root.handlers = [intercept]
    logging.root.setLevel(logging.DEBUG)


def configure_logging_from_settings(settings: "Settings", *, force: bool = False) -> None:
    """Configure logging from the ``log_*`` settings."""
    configure_logging(
        settings.log_file,
        level=settings.log_level,
        console=settings.log_console,
        force=force,
    )
