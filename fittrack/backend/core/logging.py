"""
Centralized Logging Configuration.

structlog on top of the standard logging module. Every module gets its
logger through get_logger(__name__); setup_logging() is called once by
the FastAPI lifespan and once by the CLI callback.

Settings come from config/settings/logging.yaml, validated by
LoggingSchema. Keyword arguments to setup_logging() override them, which
is how `cli.py --debug` switches to DEBUG console output.

Records written to logs/system.jsonl (when the file handler is enabled)
carry these fields:
    timestamp, level, logger, event, func_name, lineno
    source      - "api" inside an HTTP request, "cli" for the command line
    request_id  - X-Request-ID of the request being served
    frontend    - X-Frontend-ID of the caller ("cli" or "unknown")

Usage:
    logger = get_logger(__name__)
    logger.info("Workout created", extra={"workout_id": 3})

    log_with_source(logger, "cli", "info", "Command finished", command="members list")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from fittrack.backend.core.config import find_project_root, get_app_config

# The middleware binds "api" for every request; the CLI client logs as "cli".
LOG_SOURCES = frozenset({"api", "cli"})

_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore")


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor, processors: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=processors,
    )


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the backend and the CLI.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Overrides logging.yaml.
        format_type: "json" or "console". Overrides logging.yaml.
        enable_console: Write to stdout. Overrides logging.yaml.
        enable_file_logging: Write JSONL to handlers.file.path. Overrides logging.yaml.
    """
    config = get_app_config().logging
    handlers = config.handlers

    level = level or config.level
    format_type = format_type or config.format
    if enable_console is None:
        enable_console = handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers.file.enabled

    processors = _shared_processors()
    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = _formatter(structlog.processors.JSONRenderer(), processors)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        if format_type == "console":
            console_handler.setFormatter(
                _formatter(structlog.dev.ConsoleRenderer(colors=True), processors)
            )
        else:
            console_handler.setFormatter(json_formatter)
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        log_path = find_project_root() / handlers.file.path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=handlers.file.max_bytes,
            backupCount=handlers.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger for the given name, typically __name__."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message tagged with where it came from.

    Raises:
        ValueError: If source is not one of LOG_SOURCES
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "cli", "info", "Member added", member_id=4)
    """
    if source not in LOG_SOURCES:
        raise ValueError(f"Unknown log source {source!r}, expected one of {sorted(LOG_SOURCES)}")
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
