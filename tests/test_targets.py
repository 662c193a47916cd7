"""Tests for building model targets from user input."""

from providers.base import Provider
from providers.options import resolve
from generation.targets import parse_deployments, targets_for_models


class TestParseDeployments:
    def test_skips_malformed_entry_and_keeps_parsing(self) -> None:
        targets, warnings = parse_deployments("a:dall-e-3,bad,b:gpt-image-1")

        assert list(targets) == ["a", "b"]
        assert len(warnings) == 1
        assert "'bad'" in warnings[0]

    def test_target_carries_azure_options(self) -> None:
        targets, _ = parse_deployments("myGpt:gpt-image-1")
        target = targets["myGpt"]
        assert target.deployment == "myGpt"
        assert target.options == resolve("gpt-image-1", Provider.AZURE_OPENAI)

    def test_trims_whitespace_and_lowercases_type(self) -> None:
        targets, warnings = parse_deployments("  one : DALL-E-3 ,  ")
        assert warnings == []
        assert targets["one"].options == resolve("dall-e-3", Provider.AZURE_OPENAI)

    def test_unknown_model_type_is_skipped(self) -> None:
        targets, warnings = parse_deployments("x:dall-e-2,y:gpt-image-1-mini")
        assert list(targets) == ["y"]
        assert "dall-e-2" in warnings[0] and "'x'" in warnings[0]

    def test_wrong_part_counts(self) -> None:
        targets, warnings = parse_deployments("a:b:c,:dall-e-3,name:")
        assert targets == {}
        assert len(warnings) == 3

    def test_duplicate_name_last_wins(self) -> None:
        targets, _ = parse_deployments("d:dall-e-3,d:gpt-image-1")
        assert len(targets) == 1
        assert targets["d"].options == resolve("gpt-image-1", Provider.AZURE_OPENAI)

    def test_empty_input(self) -> None:
        assert parse_deployments("") == ({}, [])


class TestTargetsForModels:
    def test_openai_models_keep_selection_order(self) -> None:
        targets = targets_for_models(["gpt-image-1-mini", "dall-e-3"], Provider.OPENAI)
        assert list(targets) == ["gpt-image-1-mini", "dall-e-3"]
        assert targets["dall-e-3"].options == resolve("dall-e-3", Provider.OPENAI)

    def test_unknown_openai_model_is_dropped(self) -> None:
        assert targets_for_models(["dall-e-2"], Provider.OPENAI) == {}

    def test_google_models_have_no_options(self) -> None:
        targets = targets_for_models(["gemini-2.5-flash-image", "imagen-1"], Provider.GOOGLE_AI)
        assert list(targets) == ["gemini-2.5-flash-image"]
        assert targets["gemini-2.5-flash-image"].options is None
