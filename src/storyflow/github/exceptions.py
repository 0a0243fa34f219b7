"""Custom exceptions for the GitHub client."""


class GitHubError(Exception):
    """Base exception for GitHub client errors."""


class PullRequestCreationError(GitHubError):
    """GitHub refused to open a pull request."""
