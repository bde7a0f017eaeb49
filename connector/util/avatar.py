"""Gravatar URL derivation."""

import hashlib
from urllib.parse import urlencode

GRAVATAR_BASE_URL = "//www.gravatar.com/avatar"


def gravatar_url(
    email: str, size: int = 200, rating: str = "pg", default: str = "mm"
) -> str:
    """Build the Gravatar URL for an email address.

    Deterministic and offline: the same email always yields the same URL.

    Args:
        email: Email address
        size: Image size in pixels
        rating: Maximum content rating
        default: Fallback image when no Gravatar exists

    Returns:
        Protocol-relative Gravatar URL
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": str(size), "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}/{digest}?{query}"
