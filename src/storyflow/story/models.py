"""Data models for stories."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import StrEnum

HOTFIX_LABEL = "hotfix"


class Category(StrEnum):
    """Story type as known to the tracker."""

    FEATURE = "feature"
    BUG = "bug"
    CHORE = "chore"
    RELEASE = "release"


@dataclass(frozen=True)
class Story:
    """A tracker story, classified and optionally bound to a branch.

    Attributes:
        id: Tracker story ID.
        title: Story name. For releases this is the version, e.g. "v1.5.1".
        description: Story description, possibly empty.
        category: Story type.
        labels: Label names; order is irrelevant.
        branch_name: Branch bound to the story, once one exists.
        url: Link to the story in the tracker.
    """

    id: int
    title: str
    description: str
    category: Category
    labels: frozenset[str] = frozenset()
    branch_name: str | None = None
    url: str | None = None

    @property
    def is_hotfix(self) -> bool:
        return HOTFIX_LABEL in self.labels

    @property
    def is_release(self) -> bool:
        return self.category is Category.RELEASE

    def with_branch(self, branch_name: str) -> Story:
        """Return a copy bound to branch_name.

        Raises:
            ValueError: If the story is already bound to another branch
        """
        if self.branch_name is not None and self.branch_name != branch_name:
            raise ValueError(
                f"Story #{self.id} is already bound to branch '{self.branch_name}'"
            )
        return dataclasses.replace(self, branch_name=branch_name)


@dataclass(frozen=True)
class BranchRef:
    """A branch name split back into its parts.

    Release branches carry a version and no story ID; every other branch
    carries the story ID followed by a slug.
    """

    prefix: str
    story_id: int | None = None
    slug: str = ""
    version: str | None = None
