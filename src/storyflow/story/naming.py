"""Branch naming policy.

Feature, bug and chore branches are named ``<prefix><story-id>-<slug>``,
release branches ``<release-prefix><version>``. Hotfix stories use the hotfix
prefix whatever their type.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from storyflow.story.exceptions import UnresolvableBranchError
from storyflow.story.models import BranchRef, Story

if TYPE_CHECKING:
    from storyflow.config.models import Conventions
    from storyflow.prompts import Prompter

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_STORY_REF_RE = re.compile(r"^(?P<id>\d+)(?:-(?P<slug>.*))?$")


def slugify(text: str) -> str:
    """Return a lowercase, underscore-joined slug for text."""
    return _NON_ALNUM_RE.sub("_", text.strip().lower()).strip("_")


def branch_prefix(story: Story, conventions: Conventions) -> str:
    """Return the configured prefix for the story's branch."""
    if story.is_hotfix:
        return conventions.hotfix_prefix
    if story.is_release:
        return conventions.release_prefix
    return conventions.feature_prefix


def branch_name(
    story: Story,
    conventions: Conventions,
    slug_or_version: str | None = None,
) -> str:
    """Return the branch name for a story.

    A story already bound to a branch keeps that name. Release branches are
    named after the version (the story title unless given); all others after
    the story ID and a slug (the slugified title unless given).
    """
    if story.branch_name:
        return story.branch_name

    prefix = branch_prefix(story, conventions)
    if story.is_release:
        version = (slug_or_version or story.title).strip()
        return f"{prefix}{version}"

    slug = slugify(slug_or_version or story.title)
    if not slug:
        return f"{prefix}{story.id}"
    return f"{prefix}{story.id}-{slug}"


def prompt_branch_name(story: Story, conventions: Conventions, prompter: Prompter) -> str:
    """Ask the user for the branch name extension and return the full name.

    Release branches are fully determined by the version and are not
    prompted for.
    """
    if story.branch_name or story.is_release:
        return branch_name(story, conventions)

    prefix = branch_prefix(story, conventions)
    extension = prompter.ask(
        f"Enter branch name ({prefix}<branch-name>): ",
        default=slugify(story.title),
    )
    return branch_name(story, conventions, extension)


def parse_branch(branch: str, conventions: Conventions) -> BranchRef:
    """Split a branch name back into prefix, story ID, slug or version.

    Raises:
        UnresolvableBranchError: If no configured prefix matches, or a
            non-release branch does not start with a story ID
    """
    # Longest first so that e.g. "release/" wins over "rel"
    for prefix in sorted(set(conventions.prefixes), key=len, reverse=True):
        if not branch.startswith(prefix):
            continue

        remainder = branch[len(prefix):]
        if prefix == conventions.release_prefix:
            if not remainder:
                break
            return BranchRef(prefix=prefix, version=remainder)

        match = _STORY_REF_RE.match(remainder)
        if match is None:
            break
        return BranchRef(
            prefix=prefix,
            story_id=int(match.group("id")),
            slug=match.group("slug") or "",
        )

    raise UnresolvableBranchError(
        f"Branch '{branch}' does not match any of the configured prefixes "
        f"({', '.join(conventions.prefixes)}) followed by a story reference"
    )


def release_version(story: Story, conventions: Conventions) -> str:
    """Version a release story ships as, e.g. "v1.5.1".

    Taken from the bound release branch when there is one, else the title.
    """
    name = story.branch_name or ""
    if name.startswith(conventions.release_prefix) and len(name) > len(conventions.release_prefix):
        return name[len(conventions.release_prefix):]
    return story.title.strip()
