"""Per-model generation parameters for the OpenAI / Azure OpenAI images API."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from .base import ModelOptions, Provider

DALL_E_3 = "dall-e-3"
GPT_IMAGE_1 = "gpt-image-1"
GPT_IMAGE_1_MINI = "gpt-image-1-mini"
GPT_IMAGE_1_5 = "gpt-image-1.5"

SUPPORTED_MODEL_TYPES: Tuple[str, ...] = (DALL_E_3, GPT_IMAGE_1, GPT_IMAGE_1_MINI, GPT_IMAGE_1_5)

# Azure asks the gpt-image family for inline base64 explicitly; on OpenAI
# those models only ever return base64, so nothing is sent.
_AZURE: Dict[str, ModelOptions] = {
    DALL_E_3: ModelOptions(size="1792x1024", quality="standard", style="vivid", response_format="url"),
    GPT_IMAGE_1: ModelOptions(size="1536x1024", quality="high", response_format="b64_json"),
    GPT_IMAGE_1_MINI: ModelOptions(size="1536x1024", quality="medium", response_format="b64_json"),
    GPT_IMAGE_1_5: ModelOptions(size="1536x1024", response_format="b64_json"),
}

_OPENAI: Dict[str, ModelOptions] = {
    DALL_E_3: ModelOptions(size="1792x1024", quality="standard", style="vivid", response_format="url"),
    GPT_IMAGE_1: ModelOptions(size="1536x1024"),
    GPT_IMAGE_1_MINI: ModelOptions(size="1536x1024", quality="medium"),
    GPT_IMAGE_1_5: ModelOptions(size="1536x1024"),
}

_CATALOG = {
    Provider.AZURE_OPENAI: _AZURE,
    Provider.OPENAI: _OPENAI,
}


def resolve(model_type: str, vendor: Provider) -> Optional[ModelOptions]:
    """Return the options for ``model_type``, or None if it is not a known model.

    Google models take no options and always resolve to None here.
    """
    table = _CATALOG.get(vendor)
    if table is None:
        return None
    return table.get(model_type.strip().lower())
