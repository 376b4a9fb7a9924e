"""Structured logging configuration for attrcodec."""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog


if TYPE_CHECKING:
    from attrcodec.config.logging import LoggingSettings


def setup_logging(
    json_logs: bool = False,
    log_level_name: str = "INFO",
    show_time: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Render log lines as JSON instead of the console format
        log_level_name: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        show_time: Whether to add ISO timestamps to log lines
    """
    level = getattr(logging, log_level_name.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if show_time:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))

    renderer: Any
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            exception_formatter=structlog.dev.rich_traceback
        )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)


def setup_logging_from_settings(settings: "LoggingSettings") -> None:
    """Configure logging from the package LoggingSettings."""
    setup_logging(
        json_logs=settings.json_logs,
        log_level_name=settings.level,
        show_time=settings.show_time,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
