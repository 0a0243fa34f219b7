"""Console rendering of story metadata."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from storyflow.story.models import Story
    from storyflow.tracker import Note

LABEL_WIDTH = 11
INDENT = " " * (LABEL_WIDTH + 2)


def _field(label: str, value: str) -> list[str]:
    lines = value.splitlines() or [""]
    rendered = [f"{label:>{LABEL_WIDTH}}: {lines[0]}"]
    rendered.extend(f"{INDENT}{line}" for line in lines[1:])
    return rendered


def format_story(story: Story, notes: Sequence[Note] = ()) -> str:
    """Render ID, title, description and notes, ending in a blank line.

    Empty descriptions and notes are left out.
    """
    lines = _field("ID", str(story.id))
    lines += _field("Title", story.title)
    if story.description:
        lines += _field("Description", story.description)
    for number, note in enumerate(notes, start=1):
        lines += _field(f"Note {number}", note.text)
    return "\n".join(lines) + "\n\n"


def print_story(story: Story, notes: Sequence[Note] = ()) -> None:
    click.echo(format_story(story, notes), nl=False)
