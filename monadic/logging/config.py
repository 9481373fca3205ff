"""
Centralized logging configuration for the monadic package.

The value types only ever emit through loggers obtained from this module,
and the only event they emit is ``contract_violation`` at DEBUG, just
before a ContractError reaches the caller. Configuring output is left to
the application, either directly or through ``monadic.config``.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

PACKAGE_LOGGER = "monadic"
CONTRACT_VIOLATION_EVENT = "contract_violation"


def drop_contract_violations(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor discarding contract violation events."""
    if event_dict.get("event") == CONTRACT_VIOLATION_EVENT:
        raise structlog.DropEvent
    return event_dict


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    contract_violations: bool = True,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and the package's stdlib logger.

    ``level`` is set on the ``monadic`` logger only, so an application can
    see the package's DEBUG events without turning DEBUG on everywhere.

    Args:
        level: Level for the ``monadic`` logger (DEBUG shows contract violations)
        format_json: If True, output JSON lines; otherwise console rendering
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add the filename and line number of the failing call
        contract_violations: If False, contract violation events are dropped
        extra_processors: Additional structlog processors, run before rendering
    """
    # Handler on the root logger; the level lives on the package logger
    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level.upper()))

    processors = [structlog.stdlib.filter_by_level]

    if not contract_violations:
        processors.append(drop_contract_violations)

    processors += [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        # Skip frames inside the package so the caller's line is reported
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO],
            additional_ignores=[PACKAGE_LOGGER],
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance backed by a stdlib logger.

    Events go through ``logging.getLogger(name)``, so until the
    application configures logging the stdlib level (WARNING) hides the
    package's debug events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def log_contract_violation(
    logger: FilteringBoundLogger,
    operation: str,
    error: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a contract violation just before it is raised to the caller.

    Args:
        logger: Structlog logger instance
        operation: Name of the operation that was misused (e.g. ``List.map``)
        error: The exception about to be raised
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        error_type=type(error).__name__,
        reason=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug(CONTRACT_VIOLATION_EVENT)
