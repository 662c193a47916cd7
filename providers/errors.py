from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ImageGenError(Exception):
    """Base error for everything raised by the generation pipeline."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(ImageGenError):
    """No usable deployments/models; ends the session."""


class ValidationError(ImageGenError):
    """A single input field was rejected."""


class AuthenticationError(ImageGenError):
    """Authentication failed (401)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=401)


class RateLimitError(ImageGenError):
    """Rate limit exceeded (429)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=429)


class NotFoundError(ImageGenError):
    """Deployment or model not found (404)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class TransportError(ImageGenError):
    """Network failure or non-2xx response from a raw HTTP call."""


class DownloadError(TransportError):
    """Fetching a URL-delivered image failed."""


class ResponseFormatError(ImageGenError):
    """The provider answered, but not with usable image data."""


class NoImageDataError(ResponseFormatError):
    pass


class InvalidResponseError(ResponseFormatError):
    pass


class NoDataError(ResponseFormatError):
    pass


class FileSystemError(ImageGenError):
    """Writing the image to disk failed."""


def error_for_status(status_code: Optional[int], message: str) -> ImageGenError:
    """Build the taxonomy error matching an HTTP status code."""
    if status_code == 401:
        return AuthenticationError(message)
    if status_code == 429:
        return RateLimitError(message)
    if status_code == 404:
        return NotFoundError(message)
    return ImageGenError(message, status_code=status_code)


class ErrorCategory(str, Enum):
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    OTHER = "other"


@dataclass(frozen=True)
class Classification:
    category: ErrorCategory
    message: str


AUTHENTICATION_FAILED = "Authentication failed. Please check your API key."
RATE_LIMIT_EXCEEDED = (
    "Rate limit exceeded. Please try again later (no automatic retry is performed)."
)
MODEL_NOT_FOUND = "Model or deployment '{0}' not found."


def status_of(error: Union[BaseException, int, None]) -> Optional[int]:
    """Best-effort HTTP status lookup; returns None for non-HTTP failures."""
    if isinstance(error, bool):
        return None
    if isinstance(error, int):
        return error
    status = getattr(error, "status_code", None)
    if status is None:
        # httpx.HTTPStatusError keeps the status on the response
        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return None


def _message_of(error: Union[BaseException, int, None]) -> str:
    if isinstance(error, ImageGenError):
        return error.message
    if error is None:
        return "Unknown error"
    if isinstance(error, int) and not isinstance(error, bool):
        return f"HTTP status {error}"
    return str(error) or type(error).__name__


def classify(
    error: Union[BaseException, int, None],
    target_name: Optional[str] = None,
) -> Classification:
    """Map a failure to a user-facing category. Never raises."""
    status = status_of(error)
    if status == 401:
        return Classification(ErrorCategory.UNAUTHORIZED, AUTHENTICATION_FAILED)
    if status == 429:
        return Classification(ErrorCategory.RATE_LIMITED, RATE_LIMIT_EXCEEDED)
    if status == 404:
        return Classification(
            ErrorCategory.NOT_FOUND, MODEL_NOT_FOUND.format(target_name or "unknown")
        )
    return Classification(ErrorCategory.OTHER, _message_of(error))
