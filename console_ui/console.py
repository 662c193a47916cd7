"""Interactive terminal surface built on rich."""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable, List, Optional, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from providers.errors import ValidationError
from providers.validation import MAX_TEXT_LENGTH, check_api_key, check_https_url, check_text

from . import messages


def parse_selection(text: str, count: int) -> List[int]:
    """Parse ``"1, 3"`` into zero-based indices; at least one is required.

    >>> parse_selection("3,1,3", 4)
    [2, 0]
    """
    picked: List[int] = []
    for token in text.replace(" ", ",").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValidationError(f"'{token}' is not a number between 1 and {count}")
        index = int(token) - 1
        if index not in picked:
            picked.append(index)
    if not picked:
        raise ValidationError("Select at least one option")
    return picked


class ConsoleUI:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def show_header(self) -> None:
        self.console.clear()
        self.console.print(
            Align.center(Panel(f"[bold red]{messages.TITLE}[/]\n[red]{messages.SUBTITLE}[/]", expand=False))
        )
        self.console.print()

    def _ask(self, prompt: str, check: Callable[[str], Optional[str]], password: bool = False) -> str:
        while True:
            value = Prompt.ask(prompt, console=self.console, password=password)
            problem = check(value)
            if problem is None:
                return value
            self.error(problem)

    def select_one(self, options: Sequence[str], prompt: str) -> str:
        for i, option in enumerate(options, 1):
            self.console.print(f"  [cyan]{i}[/]. {escape(option)}")
        choice = Prompt.ask(
            prompt,
            console=self.console,
            choices=[str(i) for i in range(1, len(options) + 1)],
            show_choices=False,
        )
        return options[int(choice) - 1]

    def select_many(self, options: Sequence[str], prompt: str) -> List[str]:
        for i, option in enumerate(options, 1):
            self.console.print(f"  [cyan]{i}[/]. {escape(option)}")
        self.console.print("[grey50](comma-separated numbers, e.g. 1,3)[/]")
        while True:
            text = Prompt.ask(prompt, console=self.console)
            try:
                return [options[i] for i in parse_selection(text, len(options))]
            except ValidationError as exc:
                self.error(exc.message)

    def ask_secret(self, prompt: str) -> str:
        return self._ask(prompt, check_api_key, password=True)

    def ask_url(self, prompt: str) -> str:
        return self._ask(prompt, check_https_url)

    def ask_text(self, prompt: str, max_length: Optional[int] = MAX_TEXT_LENGTH) -> str:
        return self._ask(prompt, lambda value: check_text(value, max_length))

    def message(self, text: str) -> None:
        self.console.print(escape(text))

    def success(self, text: str) -> None:
        self.console.print(f"[green]✓[/] {escape(text)}")

    def error(self, text: str) -> None:
        self.console.print(f"[red]{escape(text)}[/]")

    def status(self, text: str) -> AbstractContextManager:
        return self.console.status(f"[yellow]{escape(text)}[/]")

    def wait_for_exit(self) -> None:
        self.console.print()
        self.console.input(messages.PRESS_KEY_TO_EXIT)
