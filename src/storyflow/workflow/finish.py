"""Finishing a story: merge it into its root branches and close it out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyflow.git_executor import DirtyWorkingTreeError
from storyflow.story import Category, NoAssociatedStoryError

if TYPE_CHECKING:
    from storyflow.git_executor import GitExecutor
    from storyflow.story import Story
    from storyflow.tracker import TrackerClient
    from storyflow.workflow.merge import MergeEngine
    from storyflow.workflow.models import MergeResult

logger = logging.getLogger("storyflow.workflow.finish")

# Story types the tracker has no "finished" state for
ACCEPT_ON_FINISH = (Category.CHORE, Category.RELEASE)


class Finisher:
    """Merges a story into its root branches and updates the tracker."""

    def __init__(
        self,
        git: GitExecutor,
        tracker: TrackerClient,
        merge_engine: MergeEngine,
    ) -> None:
        self.git = git
        self.tracker = tracker
        self.merge_engine = merge_engine

    def finish(self, story: Story | None, keep_branch: bool = False) -> list[MergeResult]:
        """Merge the story to its roots, mark it done and drop its branch.

        Args:
            story: The story bound to the current branch, None if there is none.
            keep_branch: Keep the local story branch after merging.

        Returns:
            One MergeResult per root branch.

        Raises:
            NoAssociatedStoryError: If there is no story or it has no branch
            DirtyWorkingTreeError: If the working tree has uncommitted changes
            MergeError: If a merge fails; nothing after it is attempted
        """
        if story is None or not story.branch_name:
            raise NoAssociatedStoryError("Could not find story associated with branch")

        if not self.git.clean_working_tree():
            raise DirtyWorkingTreeError(
                "Working tree has uncommitted changes; commit or stash them before finishing"
            )

        results = self.merge_engine.merge_to_roots(story)

        if story.category in ACCEPT_ON_FINISH:
            self.tracker.accept_story(story.id)
        else:
            self.tracker.finish_story(story.id)

        # Merged into every root above; -d would check against a stale upstream
        if not keep_branch:
            self.git.delete_branch(story.branch_name, force=True)

        logger.info("Finished story #%d", story.id)
        return results
