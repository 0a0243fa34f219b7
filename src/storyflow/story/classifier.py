"""Story classifier - turns raw tracker data into a typed Story."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from storyflow.story.exceptions import InvalidCategoryError
from storyflow.story.models import HOTFIX_LABEL, Category, Story

if TYPE_CHECKING:
    from storyflow.tracker import StoryRecord


def parse_category(value: str | None) -> Category:
    """Map a tracker story type onto a Category.

    Raises:
        InvalidCategoryError: If the value is not a known story type
    """
    normalized = (value or "").strip().lower()
    try:
        return Category(normalized)
    except ValueError:
        raise InvalidCategoryError(
            f"Unknown story type {value!r}; expected one of "
            f"{', '.join(category.value for category in Category)}"
        ) from None


def parse_labels(value: str | Iterable[str] | None) -> frozenset[str]:
    """Normalize labels given as "a, b,c" or as a collection of names."""
    if value is None:
        return frozenset()
    tokens = value.split(",") if isinstance(value, str) else value
    return frozenset(token.strip() for token in tokens if token and token.strip())


def is_hotfix(labels: str | Iterable[str] | None) -> bool:
    """True iff the labels contain exactly "hotfix" (case-sensitive)."""
    return HOTFIX_LABEL in parse_labels(labels)


def classify(record: StoryRecord, branch_name: str | None = None) -> Story:
    """Build a Story from a tracker record.

    Raises:
        InvalidCategoryError: If the record has an unknown story type
    """
    return Story(
        id=int(record.id),
        title=record.name,
        description=record.description or "",
        category=parse_category(record.story_type),
        labels=parse_labels(record.labels),
        branch_name=branch_name,
        url=record.url,
    )
