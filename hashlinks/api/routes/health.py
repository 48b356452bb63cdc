"""Liveness API routes."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ...schemas.url import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

GREETING = "Hello World"


@router.api_route(
    "/",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def root(request: Request) -> str:
    """Answer any request on the root path with a fixed greeting."""
    logger.info(f"Method {request.method}")
    return GREETING


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy"}
