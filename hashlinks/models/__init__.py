"""Models package for Hash Links."""

from .url import ShortenRequest, URLRecord

__all__ = ["ShortenRequest", "URLRecord"]
