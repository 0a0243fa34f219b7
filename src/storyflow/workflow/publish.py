"""Publish orchestrator - pushes a story branch and opens its pull request(s)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyflow.git_executor import DirtyWorkingTreeError
from storyflow.story import NoAssociatedStoryError, params_for_pull_request
from storyflow.workflow.models import PublishResult

if TYPE_CHECKING:
    from storyflow.config import Conventions
    from storyflow.git_executor import GitExecutor
    from storyflow.github import GitHubClient
    from storyflow.story import Story

logger = logging.getLogger("storyflow.workflow.publish")


class Publisher:
    """Publishes the story bound to the current branch.

    Pushes the branch with upstream tracking and opens a pull request
    against the development branch. Hotfixes get a second pull request
    against the validation branch. The two requests are independent: a
    failure of one does not undo the other.
    """

    def __init__(
        self,
        git: GitExecutor,
        github: GitHubClient,
        conventions: Conventions,
    ) -> None:
        """Initialize the Publisher.

        Args:
            git: GitExecutor for the repository.
            github: GitHubClient for opening pull requests.
            conventions: Branch conventions.
        """
        self.git = git
        self.github = github
        self.conventions = conventions

    def publish(self, story: Story | None) -> PublishResult:
        """Push the story's branch and open its pull request(s).

        Args:
            story: The story bound to the current branch, None if there is none.

        Returns:
            PublishResult with the pull requests that were opened.

        Raises:
            NoAssociatedStoryError: If there is no story or it has no branch
            DirtyWorkingTreeError: If the working tree has uncommitted changes
            PushError: If the push fails
            PullRequestCreationError: If GitHub refuses a pull request
        """
        if story is None or not story.branch_name:
            raise NoAssociatedStoryError("Could not find story associated with branch")

        if not self.git.clean_working_tree():
            raise DirtyWorkingTreeError(
                "Working tree has uncommitted changes; commit or stash them before publishing"
            )

        branch = story.branch_name
        logger.info("Publishing %s for story #%d", branch, story.id)
        self.git.push(branch, set_upstream=True)

        result = PublishResult(branch=branch)
        result.pull_requests.append(
            self.github.create_pull_request(params_for_pull_request(story, self.conventions))
        )

        if story.is_hotfix:
            result.pull_requests.append(
                self.github.create_pull_request(
                    params_for_pull_request(story, self.conventions, for_hotfix=True)
                )
            )

        logger.info(
            "Published %s with %d pull request(s)", branch, len(result.pull_requests)
        )
        return result
