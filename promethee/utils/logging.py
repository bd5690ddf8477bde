"""Structured logging for the preference engine (structlog over stdlib logging)."""

import logging
import sys
from pathlib import Path

import structlog
from rich.console import Console
from rich.logging import RichHandler

_FORMATS = ("console", "json")


def configure_logging(
    level: str = "INFO",
    format_type: str = "console",
    log_file: Path | None = None
) -> None:
    """Configure structured logging for engine runs.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "console" for rich terminal output, "json" for machine-readable logs
        log_file: Optional file that receives a copy of every record

    Raises:
        ValueError: If the level or format is not recognised
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if format_type not in _FORMATS:
        raise ValueError(f"Unknown log format: {format_type}")

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(log_level)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if format_type == "console":
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
        # Engine output goes to stdout, keep logs on stderr
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer()
        ]
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(log_level)
    root.addHandler(handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        root.addHandler(file_handler)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_run_context(**values) -> None:
    """Attach key/value pairs to every record logged during the current run."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def clear_run_context() -> None:
    """Drop values attached by :func:`bind_run_context`."""
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
