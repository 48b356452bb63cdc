"""Hash Links - Main FastAPI Application.

A minimal in-memory URL shortening service with:
- Deterministic short codes derived from the URL content
- Redirect to original URLs
- Liveness endpoints
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .core.config import settings
from .core.exceptions import URLNotFoundError
from .core.store import URLStore
from .api.routes import health_router, urls_router

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {settings.app_title}...")
    app.state.store = URLStore()
    logger.info("URL store initialized")
    yield
    # Shutdown
    logger.info(
        f"Shutting down {settings.app_title}, "
        f"discarding {len(app.state.store)} short URLs..."
    )


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    lifespan=lifespan,
)

@app.exception_handler(URLNotFoundError)
async def url_not_found_handler(request: Request, exc: URLNotFoundError):
    """Report an unknown short code as a plain text 404."""
    return PlainTextResponse(exc.message, status_code=404)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.error(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": "500"},
    )


# Include routers
app.include_router(health_router)
app.include_router(urls_router)
