from __future__ import annotations

import logging
import re
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from providers.errors import FileSystemError

logger = logging.getLogger(__name__)

ACCESS_DENIED = "Access denied when saving image for {0}: {1}"
FAILED_TO_SAVE = "Failed to save image for {0}: {1}"

_UNSAFE = re.compile(r"[\\/:*?\"<>|\s]+")


def output_path(output_dir: Path, model_key: str, now: Optional[datetime] = None) -> Path:
    """<output_dir>/<model_key>_<YYYYMMDD_HHMMSS>.png"""
    now = now or datetime.now()
    safe_key = _UNSAFE.sub("_", model_key).strip("._") or "image"
    return output_dir / f"{safe_key}_{now:%Y%m%d_%H%M%S}.png"


def _save_as_png(data: bytes, out_path: Path, model_key: str) -> bool:
    """Re-encode ``data`` as PNG; False if Pillow cannot decode or convert it."""
    try:
        # decode as an image (handles png/jpg/webp), then re-save as PNG
        with Image.open(BytesIO(data)) as img:
            if img.mode == "CMYK":
                img = img.convert("RGB")
            img.save(out_path, format="PNG")
        return True
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        logger.warning("Could not convert image for %s to PNG (%s); writing raw bytes", model_key, exc)
        return False


def write_image(
    data: bytes,
    model_key: str,
    output_dir: Path,
    now: Optional[datetime] = None,
) -> Path:
    out_path = output_path(output_dir, model_key, now)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        if not _save_as_png(data, out_path, model_key):
            out_path.write_bytes(data)
    except PermissionError as exc:
        raise FileSystemError(ACCESS_DENIED.format(model_key, exc)) from exc
    except OSError as exc:
        raise FileSystemError(FAILED_TO_SAVE.format(model_key, exc)) from exc
    return out_path
