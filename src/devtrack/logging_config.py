"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

DEVTRACK_LOGGER = "devtrack"


def add_component(logger, method_name: str, event_dict: dict) -> dict:
    """Tag devtrack records with their layer and a default operation.

    ``devtrack.repositories.project_repo`` becomes ``component=repositories``;
    records logged outside a service operation get ``operation="-"``.
    """
    name = event_dict.get("logger") or ""
    if name == DEVTRACK_LOGGER or name.startswith(DEVTRACK_LOGGER + "."):
        parts = name.split(".")
        event_dict.setdefault("component", parts[1] if len(parts) > 1 else "core")
        event_dict.setdefault("operation", "-")
    return event_dict


def configure_logging(log_level: str = "info", json_output: bool = False, echo_sql: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        log_level: Level for devtrack's own loggers (debug/info/warning/error).
        json_output: If True, output JSON (production). If False, console (dev).
        echo_sql: If True, log every SQL statement SQLAlchemy emits.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_component,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    # Third-party loggers stay at WARNING; devtrack records propagate at their own level
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(DEVTRACK_LOGGER).setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if echo_sql else logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
