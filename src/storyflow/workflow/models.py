"""Data models for the workflow module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storyflow.github import PullRequest


class MergeState(StrEnum):
    """Progress of a single merge operation."""

    IDLE = "idle"
    MERGE_DECIDED = "merge_decided"
    MERGED = "merged"
    TAGGED = "tagged"
    FAILED = "failed"


class MergeStrategy(StrEnum):
    """How a story branch is merged into a root branch."""

    FAST_FORWARD = "fast_forward"
    NO_FAST_FORWARD = "no_fast_forward"


@dataclass
class MergeResult:
    """Outcome of merging a story branch into one root branch.

    Attributes:
        source: The story branch.
        target: The root branch merged into.
        strategy: Strategy the merge used.
        state: Terminal state, MERGED or TAGGED.
        tag: Tag created after the merge, for releases.
    """

    source: str
    target: str
    strategy: MergeStrategy
    state: MergeState
    tag: str | None = None


@dataclass
class PublishResult:
    """Outcome of publishing a story branch.

    Attributes:
        branch: The pushed branch.
        pull_requests: Pull requests opened, in creation order.
    """

    branch: str
    pull_requests: list[PullRequest] = field(default_factory=list)
