"""Shared fixtures for the generation pipeline tests."""

from __future__ import annotations

from contextlib import nullcontext
from io import BytesIO
from typing import Callable, Dict, List, Union

import pytest
from PIL import Image

from providers.base import InlineImage, ModelTarget, RawImageResult


class RecordingReporter:
    """Collects everything the runner would print."""

    def __init__(self) -> None:
        self.messages: List[str] = []
        self.successes: List[str] = []
        self.errors: List[str] = []
        self.statuses: List[str] = []

    def message(self, text: str) -> None:
        self.messages.append(text)

    def success(self, text: str) -> None:
        self.successes.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    def status(self, text: str):
        self.statuses.append(text)
        return nullcontext()


class ScriptedProvider:
    """Provider whose result per target key is fixed up front.

    A value that is an exception instance is raised instead of returned.
    """

    name = "scripted"

    def __init__(self, script: Dict[str, Union[RawImageResult, Exception]]) -> None:
        self.script = script
        self.calls: List[str] = []

    def generate(self, target: ModelTarget, prompt: str) -> RawImageResult:
        self.calls.append(target.key)
        outcome = self.script[target.key]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_png(size=(4, 4), color=(255, 0, 0), fmt="PNG") -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def inline_png(png_bytes: bytes) -> InlineImage:
    return InlineImage(data=png_bytes, mime_type="image/png")


@pytest.fixture
def scripted_provider() -> Callable[[Dict[str, Union[RawImageResult, Exception]]], ScriptedProvider]:
    return ScriptedProvider
