"""Picking the story to work on."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyflow.story.classifier import classify
from storyflow.story.exceptions import StoryError
from storyflow.tracker import SELECTABLE_STATES

if TYPE_CHECKING:
    from storyflow.prompts import Prompter
    from storyflow.story.models import Story
    from storyflow.tracker import StoryRecord, TrackerClient

logger = logging.getLogger("storyflow.story")

DEFAULT_STORY_TYPES = ["feature", "bug"]


def _choice_label(record: StoryRecord, typed: bool) -> str:
    if typed:
        return record.name
    return f"{record.story_type.upper():<7} {record.name}"


def select_story(
    tracker: TrackerClient,
    prompter: Prompter,
    filter: str | None = None,
    limit: int = 5,
) -> Story:
    """Select a story by ID or by type.

    A numeric filter fetches that story directly. Otherwise the selectable
    stories of the filtered type (features and bugs when no filter is given)
    are queried; a single result is taken as is, several are offered to the
    user.

    Raises:
        StoryNotFoundError: If a numeric filter names an unknown story
        StoryError: If the query returns nothing
    """
    if filter and filter.strip().isdigit():
        return classify(tracker.get_story(int(filter)))

    story_type: str | list[str] = filter if filter else DEFAULT_STORY_TYPES
    records = tracker.list_stories(
        story_type=story_type,
        current_state=SELECTABLE_STATES,
        limit=limit,
    )
    if not records:
        raise StoryError(f"No {filter or 'feature or bug'} stories available to start")

    if len(records) == 1:
        record = records[0]
    else:
        labels = [_choice_label(record, typed=bool(filter)) for record in records]
        record = records[prompter.choose("Choose story", labels)]

    logger.info("Selected story #%s: %s", record.id, record.name)
    return classify(record)
