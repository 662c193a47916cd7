from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

MIN_API_KEY_LENGTH = 10
MIN_TEXT_LENGTH = 3
MAX_TEXT_LENGTH = 200
MAX_URL_LENGTH = 250


def check_api_key(value: str) -> Optional[str]:
    """Return an error message for an unusable API key, else None."""
    if not value or not value.strip():
        return "API key cannot be empty"
    if len(value) < MIN_API_KEY_LENGTH:
        return "API key too short"
    return None


def check_https_url(value: str) -> Optional[str]:
    if len(value) < MIN_TEXT_LENGTH:
        return "URL too short"
    if len(value) > MAX_URL_LENGTH:
        return "URL too long"
    parsed = urlparse(value)
    if parsed.scheme != "https" or not parsed.netloc:
        return "URL must start with https://"
    return None


def check_text(value: str, max_length: Optional[int] = MAX_TEXT_LENGTH) -> Optional[str]:
    if len(value) < MIN_TEXT_LENGTH:
        return "Input too short"
    if max_length is not None and len(value) > max_length:
        return "Input too long"
    return None
