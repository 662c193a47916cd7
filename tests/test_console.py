"""Tests for the console surface and input validation."""

from io import StringIO

import pytest
from rich.console import Console

from console_ui import console as console_module
from console_ui.console import ConsoleUI, parse_selection
from providers.errors import ValidationError
from providers.validation import check_api_key, check_https_url, check_text


@pytest.fixture
def ui() -> ConsoleUI:
    return ConsoleUI(Console(file=StringIO(), force_terminal=False, width=120))


def _answers(monkeypatch, *values):
    it = iter(values)
    monkeypatch.setattr(console_module.Prompt, "ask", lambda *args, **kwargs: next(it))


def _output(ui: ConsoleUI) -> str:
    return ui.console.file.getvalue()


class TestValidators:
    def test_api_key(self) -> None:
        assert check_api_key("") == "API key cannot be empty"
        assert check_api_key("          ") == "API key cannot be empty"
        assert check_api_key("123456789") == "API key too short"
        assert check_api_key("1234567890") is None

    @pytest.mark.parametrize(
        "url",
        ["https://my-resource.openai.azure.com/", "https://example.com"],
    )
    def test_https_url_ok(self, url) -> None:
        assert check_https_url(url) is None

    @pytest.mark.parametrize(
        "url,problem",
        [
            ("ht", "URL too short"),
            ("https://" + "a" * 250, "URL too long"),
            ("http://example.com", "URL must start with https://"),
            ("example.com", "URL must start with https://"),
        ],
    )
    def test_https_url_rejected(self, url, problem) -> None:
        assert check_https_url(url) == problem

    def test_text(self) -> None:
        assert check_text("ab") == "Input too short"
        assert check_text("abc") is None
        assert check_text("x" * 201) == "Input too long"
        assert check_text("x" * 201, max_length=None) is None


class TestParseSelection:
    def test_order_and_duplicates(self) -> None:
        assert parse_selection("3,1,3", 4) == [2, 0]

    def test_spaces(self) -> None:
        assert parse_selection(" 1 2 ", 2) == [0, 1]

    @pytest.mark.parametrize("text", ["", " , ", "0", "5", "one"])
    def test_rejected(self, text) -> None:
        with pytest.raises(ValidationError):
            parse_selection(text, 4)


class TestConsoleUI:
    def test_select_one(self, ui: ConsoleUI, monkeypatch) -> None:
        _answers(monkeypatch, "2")
        assert ui.select_one(["Azure OpenAI", "OpenAI", "Google AI"], "pick") == "OpenAI"

    def test_select_many_reprompts_until_valid(self, ui: ConsoleUI, monkeypatch) -> None:
        _answers(monkeypatch, "", "9", "1,3")
        assert ui.select_many(["a", "b", "c"], "pick") == ["a", "c"]
        assert "Select at least one option" in _output(ui)

    def test_ask_secret_reprompts(self, ui: ConsoleUI, monkeypatch) -> None:
        _answers(monkeypatch, "short", "long-enough-key")
        assert ui.ask_secret("key") == "long-enough-key"
        assert "API key too short" in _output(ui)

    def test_ask_url(self, ui: ConsoleUI, monkeypatch) -> None:
        _answers(monkeypatch, "http://insecure.example.com", "https://secure.example.com")
        assert ui.ask_url("endpoint") == "https://secure.example.com"

    def test_ask_text_min_length(self, ui: ConsoleUI, monkeypatch) -> None:
        _answers(monkeypatch, "hi", "a fox in snow")
        assert ui.ask_text("prompt") == "a fox in snow"

    def test_error_output_is_not_markup(self, ui: ConsoleUI) -> None:
        ui.error("bad [red]thing[/]")
        assert "bad [red]thing[/]" in _output(ui)
