"""Build the set of model targets a session will generate with."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from providers.base import ModelTarget, Provider
from providers.google_image import GOOGLE_IMAGE_MODELS
from providers.options import SUPPORTED_MODEL_TYPES, resolve

logger = logging.getLogger(__name__)

INVALID_DEPLOYMENT_FORMAT = (
    "Invalid format for deployment: '{0}'. Expected format: 'deploymentName:modelType'. Skipping..."
)
UNKNOWN_MODEL_TYPE = (
    "Unknown model type: '{0}'. Supported types: " + ", ".join(SUPPORTED_MODEL_TYPES)
    + ". Skipping deployment '{1}'..."
)


def _split(text: str, sep: str) -> List[str]:
    return [p.strip() for p in text.split(sep) if p.strip()]


def parse_deployments(text: str) -> Tuple[Dict[str, ModelTarget], List[str]]:
    """Parse ``name:type,name:type`` into Azure targets.

    Bad entries are skipped with a warning; a repeated deployment name
    replaces the earlier one.

    >>> targets, warnings = parse_deployments("a:dall-e-3,bad,b:gpt-image-1")
    >>> list(targets), len(warnings)
    (['a', 'b'], 1)
    """
    targets: Dict[str, ModelTarget] = {}
    warnings: List[str] = []
    for entry in _split(text, ","):
        parts = _split(entry, ":")
        if len(parts) != 2:
            warnings.append(INVALID_DEPLOYMENT_FORMAT.format(entry))
            continue
        name, model_type = parts[0], parts[1].lower()
        options = resolve(model_type, Provider.AZURE_OPENAI)
        if options is None:
            warnings.append(UNKNOWN_MODEL_TYPE.format(model_type, name))
            continue
        targets[name] = ModelTarget(key=name, deployment=name, options=options)

    for w in warnings:
        logger.info(w)
    return targets, warnings


def targets_for_models(models: Iterable[str], provider: Provider) -> Dict[str, ModelTarget]:
    """Targets for menu-selected models (OpenAI or Google AI)."""
    targets: Dict[str, ModelTarget] = {}
    for model in models:
        if provider == Provider.GOOGLE_AI:
            if model not in GOOGLE_IMAGE_MODELS:
                logger.warning("Skipping unknown Google AI model %r", model)
                continue
            targets[model] = ModelTarget(key=model, deployment=model)
            continue
        options = resolve(model, provider)
        if options is None:
            logger.warning("Skipping unknown model %r", model)
            continue
        targets[model] = ModelTarget(key=model, deployment=model, options=options)
    return targets
