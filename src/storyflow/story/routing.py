"""Root resolution - which long-lived branches a story flows into.

Two targets are deliberately kept apart: the branch a story is *merged* into
locally (``merge_target``) and the base of the pull request it is published
against (``pull_request_base``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyflow.github.models import PullRequestParams

if TYPE_CHECKING:
    from storyflow.config.models import Conventions
    from storyflow.story.models import Story


def master_branch_name(story: Story, conventions: Conventions) -> str:
    """Master-equivalent branch: validation for hotfixes, master otherwise."""
    if story.is_hotfix:
        return conventions.validation_branch
    return conventions.master_branch


def development_branch_name(story: Story, conventions: Conventions) -> str:
    return conventions.development_branch


def propagation_targets(story: Story, conventions: Conventions) -> list[str]:
    """Root branches that also receive a story after its primary merge."""
    if story.is_hotfix:
        return [conventions.master_branch, conventions.development_branch]
    return []


def merge_target(story: Story, conventions: Conventions) -> str:
    """Primary branch a finished story is merged into."""
    if story.is_hotfix or story.is_release:
        return master_branch_name(story, conventions)
    return development_branch_name(story, conventions)


def start_point(story: Story, conventions: Conventions) -> str:
    """Branch a new story branch is cut from."""
    if story.is_hotfix:
        return master_branch_name(story, conventions)
    return development_branch_name(story, conventions)


def pull_request_base(story: Story, conventions: Conventions, for_hotfix: bool = False) -> str:
    """Base branch of the story's pull request.

    Args:
        story: Story being published.
        conventions: Branch conventions.
        for_hotfix: Ask for the second, validation-based pull request of a
            hotfix. Ignored for stories without the hotfix label.
    """
    if for_hotfix and story.is_hotfix:
        return conventions.validation_branch
    if story.is_release:
        return conventions.master_branch
    return conventions.development_branch


def pull_request_title(story: Story) -> str:
    if story.is_release:
        return f"Release {story.title}"
    return story.title


def pull_request_body(story: Story) -> str:
    reference = f"[#{story.id}]({story.url})" if story.url else f"[#{story.id}]"
    if story.description:
        return f"{story.description}\n\n{reference}"
    return reference


def params_for_pull_request(
    story: Story,
    conventions: Conventions,
    for_hotfix: bool = False,
) -> PullRequestParams:
    """Compute the pull request for a story bound to a branch.

    Raises:
        ValueError: If the story has no branch yet
    """
    if not story.branch_name:
        raise ValueError(f"Story #{story.id} is not bound to a branch")
    return PullRequestParams(
        base=pull_request_base(story, conventions, for_hotfix),
        head=story.branch_name,
        title=pull_request_title(story),
        body=pull_request_body(story),
    )
