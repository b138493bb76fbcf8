"""
Domain Exception Handlers.

Translate business rule violations and constraint violations into HTTP
responses with a ``detail`` message and the ``error_type`` name.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from minishop.core.exceptions import (
    DuplicateMemberError,
    EntityNotFoundError,
    NotEnoughStockError,
    OrderNotCancellableError,
    ShopError,
)
from minishop.core.logging_config import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR = {
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateMemberError: status.HTTP_409_CONFLICT,
    NotEnoughStockError: status.HTTP_409_CONFLICT,
    OrderNotCancellableError: status.HTTP_409_CONFLICT,
}


def status_for(exc: ShopError) -> int:
    """HTTP status for a domain error, following its class hierarchy; 400 when unmapped."""
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    """Render a :class:`ShopError` with its mapped status."""
    status_code = status_for(exc)
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """A write violated a database constraint, such as a duplicate primary key."""
    logger.warning(f"{request.method} {request.url.path} violated a constraint: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Conflicting data", "error_type": type(exc).__name__},
    )
