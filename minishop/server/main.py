"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minishop.core.database import engine, init_db
from minishop.core.logging_config import get_logger, setup_logging
from minishop.core.monitoring import initialize_logfire

from .api import health, simple_orders
from .api.v1 import items as items_v1
from .api.v1 import members as members_v1
from .api.v1 import orders as orders_v1
from .api.v2 import members as members_v2
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and disposes the engine's connection
    pool on shutdown.
    """
    logger.info("Starting up minishop server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down minishop server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    minishop Server API

    Member registration and lookup, item stock and order placement, search
    and cancellation.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(members_v1.router, prefix=f"{constant.API_V1_STR}/members")
app.include_router(members_v2.router, prefix=f"{constant.API_V2_STR}/members")
app.include_router(items_v1.router, prefix=f"{constant.API_V1_STR}/items")
app.include_router(orders_v1.router, prefix=f"{constant.API_V1_STR}/orders")
app.include_router(simple_orders.router)

initialize_logfire(app=app, engine=engine)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())
