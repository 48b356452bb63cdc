"""Exceptions raised by the Hash Links core."""


class ShortenerError(Exception):
    """Base exception for all shortener errors."""
    pass


class URLNotFoundError(ShortenerError):
    """No record is stored under the requested short code."""

    def __init__(self, short_code: str, message: str = "url not found"):
        self.short_code = short_code
        self.message = message
        super().__init__(message)
