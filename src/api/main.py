"""
FastAPI application entry point.

Creates and configures the FastAPI application. The Upstash Redis client is
built once during startup; missing store configuration aborts startup.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.kv_store import init_redis
from src.kv_store.constants import APP_VERSION
from src.kv_store.logging_config import configure_logging

from .config import api_settings
from .routes import health

# Configure logging
configure_logging(api_settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting API server...")
    app.state.redis = init_redis()
    yield
    # Shutdown
    logger.info("Shutting down API server...")


# Create FastAPI application
app = FastAPI(
    title="KV Store API",
    description="Service host for the shared Upstash Redis client",
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "status_code": 500},
    )


# Include routers
app.include_router(health.router)


def run_server() -> None:
    """Run the API server using uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=api_settings.api_host,
        port=api_settings.api_port,
        reload=False,
        log_level=api_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
