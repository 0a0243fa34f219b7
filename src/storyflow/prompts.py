"""Interactive prompting, injected wherever the workflow needs user input."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import click


class Prompter(Protocol):
    """Interface for asking the user for input."""

    def ask(self, prompt: str, default: str | None = None) -> str:
        """Ask for a string, returning default on empty input."""
        ...

    def choose(self, prompt: str, choices: Sequence[str]) -> int:
        """Ask the user to pick one of choices and return its index."""
        ...


class ClickPrompter:
    """Prompter reading from the terminal via click."""

    def ask(self, prompt: str, default: str | None = None) -> str:
        value: str = click.prompt(
            prompt.rstrip(": "),
            default=default,
            show_default=default is not None,
        )
        return value.strip()

    def choose(self, prompt: str, choices: Sequence[str]) -> int:
        if not choices:
            raise ValueError("Nothing to choose from")
        for index, choice in enumerate(choices, start=1):
            click.echo(f"{index:>3}. {choice}")
        picked: int = click.prompt(prompt, type=click.IntRange(1, len(choices)))
        return picked - 1
