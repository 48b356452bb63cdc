"""URL shortening utilities module.

This module derives short codes from the content of the original URL.
"""

import hashlib

# Number of hex digits kept from the digest
SHORT_CODE_LENGTH = 8


def generate_short_code(original_url: str) -> str:
    """Generate the short code for a URL.

    The code is the first hex digits of the MD5 digest of the URL, so the
    same URL always maps to the same code.

    Args:
        original_url: URL to shorten, used verbatim.

    Returns:
        Lowercase hexadecimal short code.
    """
    digest = hashlib.md5(original_url.encode("utf-8")).hexdigest()
    return digest[:SHORT_CODE_LENGTH]
