"""Custom exceptions for the git executor."""


class GitError(Exception):
    """Base exception for git executor errors."""


class BranchError(GitError):
    """Error creating, checking out or deleting a branch."""


class PushError(GitError):
    """Error pushing to remote."""


class MergeError(GitError):
    """Error merging a branch. The message carries git's own output."""


class TagError(GitError):
    """Error creating a tag."""


class DirtyWorkingTreeError(GitError):
    """Working tree has uncommitted changes."""
