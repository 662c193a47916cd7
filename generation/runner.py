"""Sequential generation over the configured model targets.

Each target is attempted in insertion order. Any failure is caught at the
target boundary, classified and reported, and the run moves on to the next
target; only an empty target set stops a run before it starts. The tally is
folded from the list of outcomes rather than kept in counters.
"""
from __future__ import annotations

import logging
import time
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Protocol, Union

from tqdm import tqdm

from providers.acquire import ImageAcquirer
from providers.base import ImageProvider, ModelTarget
from providers.errors import ConfigurationError, ErrorCategory, ImageGenError, classify

from .artifacts import write_image

logger = logging.getLogger(__name__)

NO_TARGETS = "No valid deployments or models configured. Please check your input and try again."
GENERATING_IMAGE = "Generating image using {0}..."
GENERATION_COMPLETED = "Generation completed in {0} ms ({1:.2f} seconds)"
IMAGE_SAVED = "Image saved: {0}"
TARGET_ERROR = "Error for {0}: {1}"
UNEXPECTED_ERROR = "Unexpected error for {0}: {1}"


class Reporter(Protocol):
    def message(self, text: str) -> None: ...

    def success(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...

    def status(self, text: str) -> AbstractContextManager: ...


@dataclass(frozen=True)
class TargetSucceeded:
    key: str
    path: Path
    elapsed_seconds: float


@dataclass(frozen=True)
class TargetFailed:
    key: str
    category: ErrorCategory
    message: str


Outcome = Union[TargetSucceeded, TargetFailed]


@dataclass(frozen=True)
class RunSummary:
    success_count: int = 0
    failure_count: int = 0

    def record(self, outcome: Outcome) -> "RunSummary":
        if isinstance(outcome, TargetSucceeded):
            return RunSummary(self.success_count + 1, self.failure_count)
        return RunSummary(self.success_count, self.failure_count + 1)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[Outcome]) -> "RunSummary":
        return reduce(lambda summary, outcome: summary.record(outcome), outcomes, cls())


@dataclass
class RunReport:
    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def summary(self) -> RunSummary:
        return RunSummary.from_outcomes(self.outcomes)


def generate_one(
    target: ModelTarget,
    prompt: str,
    provider: ImageProvider,
    acquirer: ImageAcquirer,
    output_dir: Path,
    reporter: Reporter,
    clock: Callable[[], float] = time.perf_counter,
) -> Outcome:
    """Run one target end to end. Never raises for per-target failures."""
    try:
        started = clock()
        raw = provider.generate(target, prompt)
        elapsed = clock() - started
        reporter.success(GENERATION_COMPLETED.format(int(elapsed * 1000), elapsed))

        data = acquirer.to_bytes(raw, target.key)
        path = write_image(data, target.key, output_dir)
        reporter.success(IMAGE_SAVED.format(path))
        return TargetSucceeded(key=target.key, path=path, elapsed_seconds=elapsed)
    except ImageGenError as exc:
        result = classify(exc, target.deployment)
        reporter.error(TARGET_ERROR.format(target.key, exc.message))
        if result.category != ErrorCategory.OTHER:
            reporter.error(result.message)
        logger.info("Target %s failed (%s): %s", target.key, result.category.value, exc.message)
        return TargetFailed(key=target.key, category=result.category, message=result.message)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected failure for %s", target.key, exc_info=True)
        result = classify(exc, target.deployment)
        reporter.error(UNEXPECTED_ERROR.format(target.key, result.message))
        return TargetFailed(key=target.key, category=result.category, message=result.message)


def run_generation(
    targets: Mapping[str, ModelTarget],
    prompt: str,
    provider: ImageProvider,
    acquirer: ImageAcquirer,
    output_dir: Path,
    reporter: Reporter,
    show_progress: bool = False,
    clock: Callable[[], float] = time.perf_counter,
) -> RunReport:
    if not targets:
        raise ConfigurationError(NO_TARGETS)

    report = RunReport()
    for target in tqdm(list(targets.values()), desc=f"provider={provider.name}", unit="image",
                       disable=not show_progress, leave=False):
        # one live display at a time: tqdm bar or rich spinner
        status = nullcontext() if show_progress else reporter.status(GENERATING_IMAGE.format(target.key))
        with status:
            outcome = generate_one(target, prompt, provider, acquirer, output_dir, reporter, clock)
        report.outcomes.append(outcome)
        reporter.message("")
    return report
