"""Merge strategy engine - integrates finished story branches into root branches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyflow.git_executor import GitError
from storyflow.story import (
    NoAssociatedStoryError,
    master_branch_name,
    merge_target,
    propagation_targets,
    release_version,
)
from storyflow.workflow.models import MergeResult, MergeState, MergeStrategy

if TYPE_CHECKING:
    from storyflow.config import Conventions
    from storyflow.git_executor import GitExecutor
    from storyflow.story import Story

logger = logging.getLogger("storyflow.workflow.merge")


class MergeEngine:
    """Merges story branches, choosing between fast-forward and merge commit.

    A merge is fast-forward only when the target has not diverged from the
    story branch; otherwise a merge commit is always created so the branch
    topology stays visible. Release merges are followed by an annotated tag.
    The engine never resolves conflicts: a failed merge is reported as is.
    """

    def __init__(self, git: GitExecutor, conventions: Conventions) -> None:
        """Initialize the merge engine.

        Args:
            git: GitExecutor for the repository.
            conventions: Branch conventions.
        """
        self.git = git
        self.conventions = conventions
        self.state = MergeState.IDLE

    def trivial_merge(self, source: str, target: str) -> bool:
        """True when target can simply be fast-forwarded to source."""
        return self.git.is_trivial_merge(source, target)

    def decide_strategy(self, source: str, target: str) -> MergeStrategy:
        if self.trivial_merge(source, target):
            return MergeStrategy.FAST_FORWARD
        return MergeStrategy.NO_FAST_FORWARD

    def merge(self, story: Story, target: str) -> MergeResult:
        """Merge the story's branch into target.

        Checks out and refreshes target, merges with the decided strategy and
        tags release stories.

        Raises:
            NoAssociatedStoryError: If the story has no branch
            MergeError: If git refuses the merge
            GitError: If checkout, pull or tagging fails
        """
        source = story.branch_name
        if not source:
            raise NoAssociatedStoryError(f"Story #{story.id} has no branch to merge")

        self.state = MergeState.IDLE
        try:
            self.git.checkout(target)
            self.git.pull_remote(target)

            strategy = self.decide_strategy(source, target)
            self.state = MergeState.MERGE_DECIDED
            logger.info("Merging %s into %s (%s)", source, target, strategy.value)

            if strategy is MergeStrategy.FAST_FORWARD:
                self.git.merge(source, ff=True)
            else:
                self.git.merge(source, no_ff=True, message=f"Merge branch '{source}' into {target}")
            self.state = MergeState.MERGED

            tag = None
            if story.is_release:
                tag = release_version(story, self.conventions)
                self.git.tag(tag, annotated=True, message=f"Release {tag}")
                self.state = MergeState.TAGGED
        except GitError:
            self.state = MergeState.FAILED
            raise

        return MergeResult(
            source=source,
            target=target,
            strategy=strategy,
            state=self.state,
            tag=tag,
        )

    def merge_release(self, story: Story) -> MergeResult:
        """Merge a release into the master branch and tag it."""
        return self.merge(story, master_branch_name(story, self.conventions))

    def merge_to_roots(self, story: Story) -> list[MergeResult]:
        """Merge the story into its target, then into every propagation target.

        Each root branch is pushed right after it received the story; release
        merges push their tag along.

        Returns:
            One MergeResult per root branch, in merge order
        """
        target = merge_target(story, self.conventions)
        results = [self.merge(story, target)]
        self.git.push(target, tags=story.is_release)

        for root in propagation_targets(story, self.conventions):
            if root == target:
                continue
            results.append(self.merge(story, root))
            self.git.push(root)

        logger.info(
            "Merged %s into %s",
            story.branch_name,
            ", ".join(result.target for result in results),
        )
        return results
