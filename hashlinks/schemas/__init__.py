"""Schemas package for Hash Links."""

from .url import ShortenResponse, HealthResponse

__all__ = [
    "ShortenResponse",
    "HealthResponse",
]
