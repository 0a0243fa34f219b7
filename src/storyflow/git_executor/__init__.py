"""Git executor - Local git primitives used by the workflow."""

from storyflow.git_executor.exceptions import (
    BranchError,
    DirtyWorkingTreeError,
    GitError,
    MergeError,
    PushError,
    TagError,
)
from storyflow.git_executor.executor import GitExecutor
from storyflow.git_executor.models import ConfigScope

__all__ = [
    "BranchError",
    "ConfigScope",
    "DirtyWorkingTreeError",
    "GitError",
    "GitExecutor",
    "MergeError",
    "PushError",
    "TagError",
]
