"""Custom structlog processors for file system logging"""

import sys
import traceback

from structlog.contextvars import get_contextvars
from structlog.types import EventDict, WrappedLogger


def add_service_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level context to logs"""
    from fileio.core.config import settings

    event_dict.setdefault("service", settings.app_name)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def add_operation_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the operation currently running from contextvars"""
    context = get_contextvars()

    if "operation" in context:
        event_dict.setdefault("operation", context["operation"])
    if "root" in context:
        event_dict.setdefault("root", context["root"])

    return event_dict


def format_exception_info(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Format exception information for better readability"""
    exc_info = event_dict.pop("exc_info", None)
    if exc_info:
        if isinstance(exc_info, BaseException):
            exc_type, exc_value, exc_tb = type(exc_info), exc_info, exc_info.__traceback__
        elif isinstance(exc_info, tuple):
            exc_type, exc_value, exc_tb = exc_info
        else:
            exc_type, exc_value, exc_tb = sys.exc_info()

        if exc_type:
            event_dict["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb)
            }

    return event_dict


def set_log_severity(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Set proper severity field for log aggregation systems"""
    # "fatal" is how misuse of the API is reported
    level_map = {
        "debug": "DEBUG",
        "info": "INFO",
        "warning": "WARNING",
        "error": "ERROR",
        "critical": "FATAL",
    }

    if "level" in event_dict:
        event_dict["severity"] = level_map.get(event_dict["level"], "INFO")

    return event_dict
