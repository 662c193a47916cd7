from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import openai
from openai import AzureOpenAI, OpenAI

from .base import EmptyImage, InlineImage, ModelTarget, RawImageResult, UrlImage
from .errors import InvalidResponseError, TransportError, ValidationError, error_for_status
from .validation import check_api_key, check_https_url

logger = logging.getLogger(__name__)

DEFAULT_AZURE_API_VERSION = "2025-04-01-preview"


def to_raw_result(response: Any) -> RawImageResult:
    """Turn an ``images.generate`` response into a tagged result.

    A URL wins over inline data; the API never sets both.
    """
    data = getattr(response, "data", None) or []
    if not data:
        return EmptyImage()
    image = data[0]
    url = getattr(image, "url", None)
    if url:
        return UrlImage(url=url)
    b64 = getattr(image, "b64_json", None)
    if b64:
        try:
            data = base64.b64decode("".join(b64.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidResponseError(f"Invalid base64 image data in response: {exc}") from exc
        return InlineImage(data=data, mime_type="image/png")
    return EmptyImage()


def _require_api_key(api_key: str) -> None:
    problem = check_api_key(api_key)
    if problem:
        raise ValidationError(problem)


@dataclass
class _ImagesApiProvider:
    """Shared ``images.generate`` call for the OpenAI and Azure OpenAI clients."""

    name: str = "openai"
    client: Any = field(default=None, repr=False)

    def generate(self, target: ModelTarget, prompt: str) -> RawImageResult:
        kwargs = target.options.as_request_kwargs() if target.options else {}
        logger.debug("images.generate model=%s params=%s", target.deployment, kwargs)
        try:
            response = self.client.images.generate(
                model=target.deployment,
                prompt=prompt,
                n=1,
                **kwargs,
            )
        except openai.APIStatusError as exc:
            raise error_for_status(exc.status_code, str(exc.message)) from exc
        except openai.APIConnectionError as exc:
            raise TransportError(f"Connection error: {exc}") from exc
        return to_raw_result(response)


def _timeout_kwargs(timeout: Optional[float]) -> dict:
    # None would disable the SDK's own default timeout
    return {} if timeout is None else {"timeout": timeout}


@dataclass
class OpenAIImageProvider(_ImagesApiProvider):
    name: str = "openai"
    api_key: str = field(default="", repr=False)
    timeout: Optional[float] = None

    def __post_init__(self):
        _require_api_key(self.api_key)
        if self.client is None:
            self.client = OpenAI(api_key=self.api_key, **_timeout_kwargs(self.timeout))


@dataclass
class AzureOpenAIImageProvider(_ImagesApiProvider):
    name: str = "azure_openai"
    endpoint: str = ""
    api_key: str = field(default="", repr=False)
    api_version: str = DEFAULT_AZURE_API_VERSION
    timeout: Optional[float] = None

    def __post_init__(self):
        problem = check_https_url(self.endpoint)
        if problem:
            raise ValidationError(f"Invalid Azure OpenAI endpoint: {problem}")
        _require_api_key(self.api_key)
        if self.client is None:
            self.client = AzureOpenAI(
                azure_endpoint=self.endpoint,
                api_key=self.api_key,
                api_version=self.api_version,
                **_timeout_kwargs(self.timeout),
            )
