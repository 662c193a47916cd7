from __future__ import annotations

import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from providers.errors import ConfigurationError
from providers.openai_image import DEFAULT_AZURE_API_VERSION

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime knobs. Credentials are never read from here; they are prompted."""
    output_dir: Path
    http_timeout: float = 120.0
    azure_api_version: str = DEFAULT_AZURE_API_VERSION
    log_level: str = "WARNING"
    show_progress: bool = False


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    if env is None:
        load_dotenv()
        env = os.environ

    output_dir = env.get("IMAGEGEN_OUTPUT_DIR", "").strip() or tempfile.gettempdir()
    log_level = env.get("IMAGEGEN_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"IMAGEGEN_LOG_LEVEL is not a log level: {log_level!r}")

    return Settings(
        output_dir=Path(output_dir).expanduser(),
        http_timeout=_float(env, "IMAGEGEN_HTTP_TIMEOUT", 120.0),
        azure_api_version=env.get("AZURE_OPENAI_API_VERSION", "").strip() or DEFAULT_AZURE_API_VERSION,
        log_level=log_level,
        show_progress=env.get("IMAGEGEN_PROGRESS", "0").strip().lower() in ("1", "true", "yes"),
    )


def configure_logging(level: str = "WARNING") -> None:
    """Send diagnostics to stderr; console output for the user goes through rich."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)
    # the SDK and httpx log every request at INFO
    for noisy in ("httpx", "openai"):
        logging.getLogger(noisy).setLevel(max(getattr(logging, level.upper()), logging.WARNING))
