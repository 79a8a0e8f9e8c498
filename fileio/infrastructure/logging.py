import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from fileio.core.config import Settings, settings as default_settings
from fileio.infrastructure.logging_processors import (
    add_operation_context,
    add_service_context,
    format_exception_info,
    set_log_severity,
)

FILE_SYSTEM_LOGGER = "File System"


def setup_logging(config: Optional[Settings] = None) -> None:
    config = config or default_settings
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        # Add contextvars (operation, path)
        structlog.contextvars.merge_contextvars,

        add_service_context,
        add_operation_context,

        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        set_log_severity,

        format_exception_info,

        timestamper,
    ]

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.rich_traceback
        )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    channel = logging.getLogger(FILE_SYSTEM_LOGGER)
    channel.handlers.clear()
    channel.addHandler(handler)
    channel.setLevel(getattr(logging, config.log_level))
    channel.propagate = False


def get_logger(name: str = FILE_SYSTEM_LOGGER) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)
