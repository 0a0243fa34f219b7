"""Starting work on a story: pick it, branch for it, mark it started."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyflow.config import bind_story
from storyflow.git_executor import DirtyWorkingTreeError
from storyflow.story import prompt_branch_name, select_story, start_point

if TYPE_CHECKING:
    from storyflow.config import Conventions
    from storyflow.git_executor import GitExecutor
    from storyflow.prompts import Prompter
    from storyflow.story import Story
    from storyflow.tracker import TrackerClient

logger = logging.getLogger("storyflow.workflow.start")


class Starter:
    """Creates the branch for a newly picked story.

    The branch is created locally only; nothing is committed or pushed
    until the story is published.
    """

    def __init__(
        self,
        git: GitExecutor,
        tracker: TrackerClient,
        conventions: Conventions,
        prompter: Prompter,
    ) -> None:
        self.git = git
        self.tracker = tracker
        self.conventions = conventions
        self.prompter = prompter

    def start(self, filter: str | None = None, limit: int = 5) -> Story:
        """Select a story and create its branch.

        Args:
            filter: Story ID or story type, see select_story.
            limit: Maximum number of stories offered for selection.

        Returns:
            The selected story, bound to its new branch.

        Raises:
            DirtyWorkingTreeError: If the working tree has uncommitted changes
        """
        if not self.git.clean_working_tree():
            raise DirtyWorkingTreeError(
                "Working tree has uncommitted changes; commit or stash them before starting"
            )

        story = select_story(self.tracker, self.prompter, filter, limit)
        name = prompt_branch_name(story, self.conventions, self.prompter)
        base = start_point(story, self.conventions)

        self.git.checkout(base)
        self.git.pull_remote(base)
        self.git.create_branch(name, base)
        bind_story(self.git, name, story.id)

        if not story.is_release:
            self.tracker.start_story(story.id)

        logger.info("Started story #%d on %s", story.id, name)
        return story.with_branch(name)
