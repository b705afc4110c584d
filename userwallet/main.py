"""
Main FastAPI application entry point.

Wires the request context middleware, RFC 9457 exception handlers and the
v1 routers. Run with ``uvicorn userwallet.main:app``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from userwallet.core.config import settings
from userwallet.presentation.api.middleware.request_context_middleware import (
    RequestContextMiddleware,
)
from userwallet.presentation.api.v1 import v1_router
from userwallet.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create tables when ``db_auto_create`` is set (local runs,
      tests); otherwise the schema comes from Alembic migrations
    - Shutdown: dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from userwallet.core.container import get_database, get_logger

    database = get_database()
    if settings.db_auto_create:
        await database.create_all()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()


app = FastAPI(
    title=settings.app_name,
    description="Users and their wallets",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation + per-request transaction context
app.add_middleware(RequestContextMiddleware)

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic status.

    Returns:
        dict: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    from userwallet.core.container import get_database

    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "database": "unavailable"},
    )
