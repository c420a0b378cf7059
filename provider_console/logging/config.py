"""
Centralized logging configuration for the provider console.

This module provides standardized logging configuration using structlog
for all components. Form submissions, lifecycle actions and remote calls
all log through this configuration so operator activity can be audited.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_action_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for provider lifecycle actions (start, stop, delete, save).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the provider action subsystem
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="provider_actions",
        audit_trail=True
    )


def get_form_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for configuration form sessions."""
    return get_logger(name).bind(subsystem="config_form")


def log_provider_action(
    logger: FilteringBoundLogger,
    provider: str,
    action: str,
    outcome: str,
    reason: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a provider action with standardized format.

    Args:
        logger: Structlog logger instance
        provider: Name of the provider the action targeted
        action: Action name (create, update, start, stop, delete)
        outcome: "success", "failed" or "rejected"
        reason: Failure or rejection reason
        context: Additional context data
    """
    bound_logger = logger.bind(
        provider=provider,
        action=action,
        outcome=outcome,
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome == "success":
        bound_logger.info("Provider action completed")
    else:
        bound_logger.warning("Provider action did not complete")
