from __future__ import annotations
import logging
from typing import Dict, Tuple

from console_ui import messages
from console_ui.console import ConsoleUI
from generation.config import Settings, configure_logging, load_settings
from generation.runner import RunReport, run_generation
from generation.targets import parse_deployments, targets_for_models
from providers.acquire import ImageAcquirer
from providers.base import ImageProvider, ModelTarget, Provider
from providers.errors import ConfigurationError, ImageGenError
from providers.options import SUPPORTED_MODEL_TYPES
from providers.registry import PROVIDERS, build_provider, menu_models

logger = logging.getLogger(__name__)

_KEY_PROMPTS = {
    Provider.AZURE_OPENAI: messages.ENTER_AZURE_API_KEY,
    Provider.OPENAI: messages.ENTER_OPENAI_API_KEY,
    Provider.GOOGLE_AI: messages.ENTER_GOOGLE_API_KEY,
}


def configure(ui: ConsoleUI, settings: Settings) -> Tuple[ImageProvider, Dict[str, ModelTarget]]:
    """Pick the provider, collect credentials and build the model targets.

    Raises ConfigurationError when the session cannot continue.
    """
    ui.show_header()
    provider = Provider(ui.select_one([p.value for p in PROVIDERS], messages.SELECT_PROVIDER))

    endpoint = ""
    if provider == Provider.AZURE_OPENAI:
        ui.show_header()
        endpoint = ui.ask_url(messages.ENTER_AZURE_ENDPOINT)
    ui.show_header()
    api_key = ui.ask_secret(_KEY_PROMPTS[provider])

    try:
        client = build_provider(
            provider,
            api_key=api_key,
            endpoint=endpoint,
            api_version=settings.azure_api_version,
            timeout=settings.http_timeout,
        )
    except (ImageGenError, ValueError) as exc:
        raise ConfigurationError(messages.ERROR_INITIALIZING_CLIENT.format(provider.value, exc))

    ui.show_header()
    if provider == Provider.AZURE_OPENAI:
        ui.console.print(messages.ENTER_DEPLOYMENTS.format(", ".join(SUPPORTED_MODEL_TYPES)))
        ui.console.print()
        targets, warnings = parse_deployments(ui.ask_text(">", max_length=None))
        for warning in warnings:
            ui.error(warning)
    else:
        selected = ui.select_many(list(menu_models(provider)), messages.SELECT_MODELS)
        targets = targets_for_models(selected, provider)
    return client, targets


def report_summary(ui: ConsoleUI, report: RunReport) -> None:
    summary = report.summary
    ui.message("")
    if summary.success_count > 0:
        ui.console.print(f"[green]{messages.IMAGES_GENERATED.format(summary.success_count)}[/]")
    if summary.failure_count > 0:
        ui.console.print(f"[red]{messages.IMAGES_FAILED.format(summary.failure_count)}[/]")


def main() -> None:
    ui = ConsoleUI()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        ui.error(exc.message)
        ui.wait_for_exit()
        return
    configure_logging(settings.log_level)

    acquirer = ImageAcquirer(timeout=settings.http_timeout)
    client = None
    try:
        client, targets = configure(ui, settings)
        if not targets:
            raise ConfigurationError(
                "No valid deployments configured. Please check your input format and try again."
            )

        prompt = ui.ask_text(messages.ENTER_IMAGE_PROMPT, max_length=None)

        ui.show_header()
        ui.console.print(messages.STARTING_GENERATION)
        ui.message("")
        report = run_generation(
            targets,
            prompt,
            client,
            acquirer,
            settings.output_dir,
            ui,
            show_progress=settings.show_progress,
        )
        report_summary(ui, report)
    except ConfigurationError as exc:
        logger.info("Session aborted: %s", exc.message)
        ui.error(exc.message)
    finally:
        acquirer.close()
        if hasattr(client, "close"):
            client.close()
    ui.wait_for_exit()


if __name__ == "__main__":
    main()
