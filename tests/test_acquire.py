"""Tests for turning provider results into bytes."""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from providers.acquire import ImageAcquirer
from providers.base import EmptyImage, InlineImage, UrlImage
from providers.errors import DownloadError, NoDataError

IMAGE_URL = "https://blob.example.com/generated/fox.png"


class TestImageAcquirer:
    def test_url_is_downloaded(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=IMAGE_URL, method="GET", content=b"downloaded")
        acquirer = ImageAcquirer()

        assert acquirer.to_bytes(UrlImage(IMAGE_URL), "dall-e-3") == b"downloaded"
        acquirer.close()

    def test_inline_bytes_are_returned_without_network(self) -> None:
        acquirer = ImageAcquirer()
        assert acquirer.to_bytes(InlineImage(b"inline"), "gpt-image-1") == b"inline"
        assert acquirer.http_client is None

    def test_empty_result_names_the_model(self) -> None:
        with pytest.raises(NoDataError) as info:
            ImageAcquirer().to_bytes(EmptyImage(), "gpt-image-1-mini")
        assert "gpt-image-1-mini" in info.value.message

    def test_network_failure_is_download_error(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=IMAGE_URL)

        with pytest.raises(DownloadError) as info:
            ImageAcquirer().to_bytes(UrlImage(IMAGE_URL), "dall-e-3")
        assert "timed out" in info.value.message

    def test_http_error_status_is_download_error(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=IMAGE_URL, status_code=403)

        with pytest.raises(DownloadError) as info:
            ImageAcquirer().to_bytes(UrlImage(IMAGE_URL), "dall-e-3")
        assert info.value.message.startswith("Error downloading image from URL:")
        assert info.value.status_code is None

    def test_unknown_result_type(self) -> None:
        with pytest.raises(TypeError):
            ImageAcquirer().to_bytes("https://not-wrapped", "x")  # type: ignore[arg-type]
