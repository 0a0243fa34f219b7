"""Data models for the tracker client."""

from dataclasses import dataclass, field


@dataclass
class StoryRecord:
    """A story as returned by Pivotal Tracker, before classification."""

    id: int
    name: str
    story_type: str
    description: str = ""
    labels: list[str] = field(default_factory=list)
    current_state: str = "unstarted"
    url: str | None = None


@dataclass
class Note:
    """A comment left on a story."""

    text: str
    noted_at: str = ""
