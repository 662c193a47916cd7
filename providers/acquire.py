from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from .base import EmptyImage, InlineImage, RawImageResult, UrlImage
from .errors import DownloadError, NoDataError

logger = logging.getLogger(__name__)

ERROR_DOWNLOADING_IMAGE = "Error downloading image from URL: {0}"
NO_IMAGE_DATA = "No image data available for {0}."


@dataclass
class ImageAcquirer:
    """Turns any provider result into the image bytes to write.

    dall-e-3 hands back a URL, the gpt-image family inline base64, and
    Google base64 inside JSON (already decoded by its provider).
    """
    timeout: float = 120.0
    http_client: Optional[httpx.Client] = field(default=None, repr=False)

    def _client(self) -> httpx.Client:
        if self.http_client is None:
            self.http_client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self.http_client

    def to_bytes(self, result: RawImageResult, model_key: str) -> bytes:
        if isinstance(result, UrlImage):
            return self._download(result.url)
        if isinstance(result, InlineImage):
            return result.data
        if isinstance(result, EmptyImage):
            raise NoDataError(NO_IMAGE_DATA.format(model_key))
        raise TypeError(f"Unsupported image result: {result!r}")

    def _download(self, url: str) -> bytes:
        logger.debug("Downloading image from %s", url)
        try:
            response = self._client().get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            # no status_code: a blob 404 is not a missing deployment
            raise DownloadError(ERROR_DOWNLOADING_IMAGE.format(exc)) from exc
        return response.content

    def close(self) -> None:
        if self.http_client is not None:
            self.http_client.close()
            self.http_client = None
