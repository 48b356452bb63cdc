"""Core package - configuration, errors and the URL store."""

from .config import settings, get_settings
from .exceptions import ShortenerError, URLNotFoundError
from .store import URLStore, get_store

__all__ = [
    "settings",
    "get_settings",
    "ShortenerError",
    "URLNotFoundError",
    "URLStore",
    "get_store",
]
