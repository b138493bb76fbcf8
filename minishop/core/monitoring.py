"""
Monitoring and Tracing Configuration Module.

This module wires minishop into Pydantic Logfire:
- FastAPI endpoint tracing
- SQLAlchemy statement tracing
- Structured API request and domain event records

Logfire is only configured when ``LOGFIRE_ENABLED`` is true and a token is
present. Every helper also writes to the standard logger, so request and
domain records are never lost when Logfire is off.
"""

from typing import Any, Optional

import logfire
from fastapi import FastAPI

from minishop.core.logging_config import get_logger

logger = get_logger(__name__)

_logfire_enabled = False


def is_logfire_enabled() -> bool:
    """Whether :func:`initialize_logfire` configured Logfire for this process."""
    return _logfire_enabled


def initialize_logfire(app: Optional[FastAPI] = None, engine: Any = None) -> None:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance to instrument (optional).
        engine: SQLAlchemy engine whose statements should be traced (optional).
            An ``AsyncEngine`` is unwrapped to its sync engine.
    """
    global _logfire_enabled

    from minishop.server.core.config import settings

    config = settings.logfire
    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return

    try:
        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            environment=config.environment,
        )

        if app is not None:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")

        if engine is not None:
            logfire.instrument_sqlalchemy(engine=getattr(engine, "sync_engine", engine))
            logger.info("Logfire: SQLAlchemy instrumentation enabled")

        _logfire_enabled = True
        logger.info(
            f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    logger.info(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    if _logfire_enabled:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )


def log_domain_event(event: str, **attributes: Any) -> None:
    """
    Record a business event such as a member joining or an order being placed.

    Args:
        event: Short event name (e.g. ``"order placed"``)
        **attributes: Identifiers describing the event
    """
    details = ", ".join(f"{key}={value}" for key, value in attributes.items())
    logger.info(f"{event}: {details}" if details else event)
    if _logfire_enabled:
        logfire.info(event, **attributes)
