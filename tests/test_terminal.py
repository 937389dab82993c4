from __future__ import annotations

import io

import pytest
from rich.console import Console

from numer.errors import UserCancellation
from numer.terminal import Choice, RichTerminal


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def rich_terminal(output: io.StringIO) -> RichTerminal:
    return RichTerminal(Console(file=output, force_terminal=False, width=100))


def test_select_returns_value_of_picked_entry(monkeypatch, rich_terminal, output):
    monkeypatch.setattr("numer.terminal.Prompt.ask", lambda *args, **kwargs: "2")

    picked = rich_terminal.select(
        "Choose a template",
        [Choice("React", "react"), Choice("Lib", "lib", hint="coming soon")],
    )

    assert picked == "lib"
    rendered = output.getvalue()
    assert "Choose a template" in rendered
    assert "1) React" in rendered
    assert "2) Lib (coming soon)" in rendered


def test_text_falls_back_to_default(monkeypatch, rich_terminal):
    monkeypatch.setattr("numer.terminal.Prompt.ask", lambda *args, **kwargs: "")
    assert rich_terminal.text("Name", default="project-name") == "project-name"


@pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
def test_interrupts_become_cancellation(monkeypatch, rich_terminal, error):
    def interrupted(*args, **kwargs):
        raise error()

    monkeypatch.setattr("numer.terminal.Prompt.ask", interrupted)

    with pytest.raises(UserCancellation):
        rich_terminal.text("Name")
    with pytest.raises(UserCancellation):
        rich_terminal.select("Pick", [Choice("A", 1)])


def test_select_needs_choices(rich_terminal):
    with pytest.raises(ValueError):
        rich_terminal.select("Pick", [])


def test_messages_escape_user_text(rich_terminal, output):
    rich_terminal.error("bad [name]")
    rich_terminal.cancel("Cancelled")
    assert "bad [name]" in output.getvalue()
    assert "Cancelled" in output.getvalue()
