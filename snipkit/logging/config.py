"""
Centralized logging configuration for snipkit.

This module provides standardized logging configuration using structlog
for all utilities. Every module should obtain its logger from here so
output stays consistent whether rendered for a console or as JSON.
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
    Configure structlog for the entire library.

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


def get_deferred_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for deferred computations.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the deferred subsystem context
    """
    return get_logger(name).bind(subsystem="deferred")


def log_settlement(
    logger: FilteringBoundLogger,
    operation: str,
    outcome: str,
    argument: Any,
    result: Any = None,
    error: Optional[BaseException] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the settlement of a single-resolution future in a standard format.

    Args:
        logger: Structlog logger instance
        operation: Name of the deferred operation
        outcome: "resolved", "rejected" or "skipped"
        argument: Input the computation was scheduled with
        result: Success value, when resolved
        error: Failure reason, when rejected
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        outcome=outcome,
        argument=argument,
    )

    if result is not None:
        bound_logger = bound_logger.bind(result=result)
    if error is not None:
        bound_logger = bound_logger.bind(error=str(error), error_type=type(error).__name__)
    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome == "rejected":
        bound_logger.warning("Deferred computation rejected")
    elif outcome == "skipped":
        bound_logger.debug("Deferred computation already settled")
    else:
        bound_logger.debug("Deferred computation resolved")
