"""
Main FastAPI application entry point.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from vacation_planner import __version__
from vacation_planner.config import get_settings
from vacation_planner.database import close_db, init_db
from vacation_planner.exceptions import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Initializes database on startup and closes connections on shutdown.
    """
    settings = get_settings()
    print(f"Starting {settings.app_name} v{__version__}")
    print(f"Debug: {settings.debug}")

    await init_db()

    yield

    await close_db()

    print(f"{settings.app_name} shutdown complete")


class TimingMiddleware(BaseHTTPMiddleware):
    """Log requests slower than 100ms."""

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        if duration > 100:
            logger.warning("SLOW REQUEST: %s %s took %.0fms", request.method, request.url.path, duration)
        return response


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Vacation scheduling rules for nursing units",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
    )

    app.add_middleware(TimingMiddleware)

    # Include routers
    from vacation_planner.routers import events, health

    app.include_router(health.router, tags=["Health"])
    app.include_router(events.router, prefix="/api", tags=["Events"])

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Render application errors as {"error": ...} bodies."""
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_content(),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc)},
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vacation_planner.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
