"""In-memory URL store for Hash Links.

This module keeps the short code to URL mapping for the lifetime of the
process and provides dependency injection for FastAPI endpoints.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import Request

from .exceptions import URLNotFoundError
from ..models.url import URLRecord
from ..utils.shortener import generate_short_code

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class URLStore:
    """Thread-safe mapping from short code to URL record."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Initialize an empty store.

        Args:
            clock: Callable returning the creation time for new records.
                Defaults to the current UTC time.
        """
        self._clock = clock or utc_now
        self._records: dict[str, URLRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, short_code: object) -> bool:
        with self._lock:
            return short_code in self._records

    def put(self, original_url: str) -> str:
        """Store a URL under its derived short code.

        Storing a URL that is already present overwrites its record with a
        new creation time. Two URLs sharing a code overwrite each other.

        Args:
            original_url: The original URL, stored verbatim.

        Returns:
            The short code.
        """
        short_code = generate_short_code(original_url)
        record = URLRecord(
            id=short_code,
            original_url=original_url,
            short_code=short_code,
            creation_time=self._clock(),
        )
        with self._lock:
            previous = self._records.get(short_code)
            self._records[short_code] = record
        if previous is not None and previous.original_url != original_url:
            logger.warning(
                f"Short code {short_code} collision: "
                f"{previous.original_url!r} replaced by {original_url!r}"
            )
        logger.info(f"Created short URL: {short_code}")
        return short_code

    def get(self, short_code: str) -> URLRecord:
        """Get URL record by short code.

        Args:
            short_code: The short URL code.

        Returns:
            The stored record.

        Raises:
            URLNotFoundError: If no record is stored under the code.
        """
        with self._lock:
            record = self._records.get(short_code)
        if record is None:
            logger.info(f"Short URL not found: {short_code!r}")
            raise URLNotFoundError(short_code)
        return record


def get_store(request: Request) -> URLStore:
    """Get the application's store for dependency injection.

    Args:
        request: FastAPI request object.

    Returns:
        URLStore owned by the running application.
    """
    return request.app.state.store
