"""Response schemas for Hash Links."""

from pydantic import BaseModel


class ShortenResponse(BaseModel):
    """Response model for a shortened URL."""

    short_url: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
