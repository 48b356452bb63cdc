"""Utils package for Hash Links."""

from .shortener import SHORT_CODE_LENGTH, generate_short_code

__all__ = [
    "SHORT_CODE_LENGTH",
    "generate_short_code",
]
