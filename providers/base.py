from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union


class Provider(str, Enum):
    AZURE_OPENAI = "Azure OpenAI"
    OPENAI = "OpenAI"
    GOOGLE_AI = "Google AI"


@dataclass(frozen=True)
class ModelOptions:
    """Generation parameters sent to the OpenAI images endpoint.

    ``None`` means "let the service pick its default" and is never sent.
    """
    size: str
    quality: Optional[str] = None
    style: Optional[str] = None
    response_format: Optional[str] = None

    def as_request_kwargs(self) -> dict:
        fields = {
            "size": self.size,
            "quality": self.quality,
            "style": self.style,
            "response_format": self.response_format,
        }
        return {k: v for k, v in fields.items() if v is not None}


@dataclass(frozen=True)
class ModelTarget:
    key: str            # display name, also used for the output filename
    deployment: str     # Azure deployment name or plain model id
    options: Optional[ModelOptions] = None


@dataclass(frozen=True)
class UrlImage:
    url: str


@dataclass(frozen=True)
class InlineImage:
    data: bytes
    mime_type: Optional[str] = None


@dataclass(frozen=True)
class EmptyImage:
    pass


RawImageResult = Union[UrlImage, InlineImage, EmptyImage]


class ImageProvider(Protocol):
    name: str

    def generate(self, target: ModelTarget, prompt: str) -> RawImageResult:
        """Produce exactly one image for ``target`` from ``prompt``."""
        ...
