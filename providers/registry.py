from __future__ import annotations

from typing import Tuple

from .base import ImageProvider, Provider
from .google_image import GOOGLE_IMAGE_MODELS, GoogleImageProvider
from .openai_image import AzureOpenAIImageProvider, OpenAIImageProvider
from .options import SUPPORTED_MODEL_TYPES

PROVIDERS: Tuple[Provider, ...] = (Provider.AZURE_OPENAI, Provider.OPENAI, Provider.GOOGLE_AI)


def menu_models(provider: Provider) -> Tuple[str, ...]:
    """Fixed model menu for providers that do not use named deployments."""
    if provider == Provider.GOOGLE_AI:
        return GOOGLE_IMAGE_MODELS
    if provider == Provider.OPENAI:
        return SUPPORTED_MODEL_TYPES
    return ()


def build_provider(
    provider: Provider,
    api_key: str,
    endpoint: str = "",
    api_version: str = "",
    timeout: float = 120.0,
) -> ImageProvider:
    """Create the session's provider client; raises ValidationError on bad credentials."""
    if provider == Provider.AZURE_OPENAI:
        kwargs = {"api_version": api_version} if api_version else {}
        return AzureOpenAIImageProvider(endpoint=endpoint, api_key=api_key, timeout=timeout, **kwargs)
    if provider == Provider.OPENAI:
        return OpenAIImageProvider(api_key=api_key, timeout=timeout)
    if provider == Provider.GOOGLE_AI:
        return GoogleImageProvider(api_key=api_key, timeout=timeout)
    raise ValueError(f"Unknown provider: {provider}")
