"""Terminal front-ends used to ask questions and report progress."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from .errors import UserCancellation

__all__ = ["Choice", "RichTerminal", "Terminal"]


@dataclass(frozen=True, slots=True)
class Choice:
    """One entry of a single choice menu."""

    label: str
    value: Any
    hint: str = ""


class Terminal(ABC):
    """Line based prompts plus a handful of status messages.

    ``text`` and ``select`` raise :class:`UserCancellation` when the user
    aborts the prompt.
    """

    @abstractmethod
    def text(self, message: str, *, default: str = "") -> str:
        """Ask for one line of text, returning ``default`` for an empty answer."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """Ask the user to pick one of ``choices`` and return its value."""

    @abstractmethod
    def intro(self, title: str) -> None: ...

    @abstractmethod
    def step(self, message: str) -> None: ...

    @abstractmethod
    def message(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def cancel(self, message: str) -> None: ...

    @abstractmethod
    def outro(self, message: str) -> None: ...


class RichTerminal(Terminal):
    """:class:`Terminal` rendered with :mod:`rich`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def text(self, message: str, *, default: str = "") -> str:
        try:
            answer = Prompt.ask(
                f"[cyan]?[/cyan] {message}",
                console=self.console,
                default=default,
                show_default=bool(default),
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancellation() from None
        return answer if answer else default

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        if not choices:
            raise ValueError("select() needs at least one choice")

        self.console.print(f"[cyan]?[/cyan] {message}")
        for index, choice in enumerate(choices, start=1):
            line = f"  [bold]{index}[/bold]) {choice.label}"
            if choice.hint:
                line = f"{line} [dim]({escape(choice.hint)})[/dim]"
            self.console.print(line)

        keys = [str(index) for index in range(1, len(choices) + 1)]
        try:
            picked = Prompt.ask(
                "  Select",
                console=self.console,
                choices=keys,
                default=keys[0],
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancellation() from None
        return choices[int(picked) - 1].value

    def intro(self, title: str) -> None:
        self.console.print(Panel.fit(f"[black on cyan] {escape(title)} [/]", border_style="cyan"))

    def step(self, message: str) -> None:
        self.console.print(f"[green]◇[/green] {message}")

    def message(self, message: str) -> None:
        self.console.print(f"│ {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]▲ {escape(message)}[/red]")

    def cancel(self, message: str) -> None:
        self.console.print(f"[red]■ {escape(message)}[/red]")

    def outro(self, message: str) -> None:
        self.console.print(Panel(message, border_style="green", expand=False))
