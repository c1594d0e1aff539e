"""
KV Gateway Application Entry Point

FastAPI application main entry, including router registration and application configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from kv_gateway import __version__
from kv_gateway.api import keys_router
from kv_gateway.common.errors import AppError
from kv_gateway.config import get_settings
from kv_gateway.db.redis import close_redis, create_redis
from kv_gateway.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Connect to Redis on startup, close the connection on shutdown.
    An unreachable store aborts startup.
    """
    # Startup
    app.state.redis = await create_redis(get_settings())
    yield
    # Shutdown
    await close_redis(app.state.redis)
    app.state.redis = None


# Create FastAPI application
settings = get_settings()

# "/docs" and "/redoc" would shadow key lookups, so the docs live at /api-docs only
app = FastAPI(
    title=settings.APP_NAME,
    description="REST interface over a Redis-compatible key-value store",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api-docs",
    redoc_url=None,
)


# Global Exception Handler
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Handle application custom exceptions

    Errors are returned as plain text "Error: <message>". With
    LEGACY_ERROR_STATUS enabled the status is always 200.
    """
    settings = get_settings()
    status_code = 200 if settings.LEGACY_ERROR_STATUS else exc.status_code
    return PlainTextResponse(exc.to_text(), status_code=status_code)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    Stack traces are logged; details are only returned to clients in debug mode.
    """
    settings = get_settings()
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )

    message = str(exc) if settings.DEBUG else "Internal server error"
    return PlainTextResponse(f"Error: {message}", status_code=500)


# Register Routers
app.include_router(keys_router)


def run() -> None:
    """Start the gateway with uvicorn"""
    import uvicorn

    uvicorn.run(
        "kv_gateway.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
