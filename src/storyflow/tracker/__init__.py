"""Tracker client - Reads and updates Pivotal Tracker stories."""

from storyflow.tracker.client import SELECTABLE_STATES, TrackerClient
from storyflow.tracker.exceptions import StoryNotFoundError, TrackerError
from storyflow.tracker.models import Note, StoryRecord

__all__ = [
    "SELECTABLE_STATES",
    "Note",
    "StoryNotFoundError",
    "StoryRecord",
    "TrackerClient",
    "TrackerError",
]
