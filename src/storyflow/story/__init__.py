"""Story - Classification, branch naming and root resolution."""

from storyflow.story.classifier import classify, is_hotfix, parse_category, parse_labels
from storyflow.story.display import format_story, print_story
from storyflow.story.exceptions import (
    InvalidCategoryError,
    NoAssociatedStoryError,
    StoryError,
    UnresolvableBranchError,
)
from storyflow.story.models import HOTFIX_LABEL, BranchRef, Category, Story
from storyflow.story.naming import (
    branch_name,
    branch_prefix,
    parse_branch,
    prompt_branch_name,
    release_version,
    slugify,
)
from storyflow.story.routing import (
    development_branch_name,
    master_branch_name,
    merge_target,
    params_for_pull_request,
    propagation_targets,
    pull_request_base,
    start_point,
)
from storyflow.story.selection import select_story

__all__ = [
    "HOTFIX_LABEL",
    "BranchRef",
    "Category",
    "InvalidCategoryError",
    "NoAssociatedStoryError",
    "Story",
    "StoryError",
    "UnresolvableBranchError",
    "branch_name",
    "branch_prefix",
    "classify",
    "development_branch_name",
    "format_story",
    "is_hotfix",
    "master_branch_name",
    "merge_target",
    "params_for_pull_request",
    "parse_branch",
    "parse_category",
    "parse_labels",
    "print_story",
    "prompt_branch_name",
    "propagation_targets",
    "pull_request_base",
    "release_version",
    "select_story",
    "slugify",
    "start_point",
]
