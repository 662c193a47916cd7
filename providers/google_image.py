from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import httpx

from .base import InlineImage, ModelTarget, RawImageResult
from .errors import InvalidResponseError, NoImageDataError, TransportError, ValidationError
from .validation import check_api_key

logger = logging.getLogger(__name__)

GOOGLE_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GOOGLE_IMAGE_MODELS: Tuple[str, ...] = (
    "gemini-2.5-flash-image",
    "gemini-3-pro-image-preview",
)

GOOGLE_NO_IMAGE_DATA = "Google AI response did not contain image data."
GOOGLE_INVALID_RESPONSE = "Google AI response contained invalid image data."


# Request body: {"contents": [{"parts": [{"text": ...}]}]}
@dataclass
class RequestPart:
    text: str


@dataclass
class RequestContent:
    parts: List[RequestPart]
    role: Optional[str] = None


@dataclass
class GenerateContentRequest:
    contents: List[RequestContent]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.title() for word in rest)


def _wire(value: Any) -> Any:
    """camelCase keys, drop None fields."""
    if isinstance(value, dict):
        return {_camel(k): _wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_wire(v) for v in value]
    return value


def build_request_body(prompt: str) -> Dict[str, Any]:
    request = GenerateContentRequest(contents=[RequestContent(parts=[RequestPart(text=prompt)])])
    return _wire(asdict(request))


def _iter_inline_data(payload: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    # All parts of all candidates, in response order.
    for candidate in payload.get("candidates") or []:
        content = (candidate or {}).get("content") or {}
        for part in content.get("parts") or []:
            inline = (part or {}).get("inlineData")
            if isinstance(inline, dict):
                yield inline


def extract_image(payload: Dict[str, Any]) -> InlineImage:
    """Decode the first non-empty ``inlineData`` part of a generateContent response.

    Later candidates are ignored once a part with data has been found.
    """
    inline = next(
        (d for d in _iter_inline_data(payload) if isinstance(d.get("data"), str) and d["data"].strip()),
        None,
    )
    if inline is None:
        raise NoImageDataError(GOOGLE_NO_IMAGE_DATA)
    try:
        raw = base64.b64decode("".join(inline["data"].split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidResponseError(GOOGLE_INVALID_RESPONSE) from exc
    return InlineImage(data=raw, mime_type=inline.get("mimeType"))


@dataclass
class GoogleImageProvider:
    name: str = "google_ai"
    api_key: str = field(default="", repr=False)
    timeout: float = 120.0
    base_url: str = GOOGLE_API_BASE
    http_client: Optional[httpx.Client] = field(default=None, repr=False)

    def __post_init__(self):
        problem = check_api_key(self.api_key)
        if problem:
            raise ValidationError(problem)

    def _client(self) -> httpx.Client:
        if self.http_client is None:
            self.http_client = httpx.Client(timeout=self.timeout)
        return self.http_client

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    def generate(self, target: ModelTarget, prompt: str) -> RawImageResult:
        url = self.endpoint(target.deployment)
        logger.debug("POST %s", url)
        try:
            response = self._client().post(
                url,
                json=build_request_body(prompt),
                headers={"x-goog-api-key": self.api_key},
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to Google AI failed: {exc}") from exc

        if not response.is_success:
            raise TransportError(
                f"Google AI request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponseError(GOOGLE_INVALID_RESPONSE) from exc
        if not isinstance(payload, dict):
            raise InvalidResponseError(GOOGLE_INVALID_RESPONSE)
        return extract_image(payload)

    def close(self) -> None:
        if self.http_client is not None:
            self.http_client.close()
            self.http_client = None
