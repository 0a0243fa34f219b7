"""GitHub client - Opens pull requests for published branches."""

from storyflow.github.client import GitHubClient
from storyflow.github.exceptions import GitHubError, PullRequestCreationError
from storyflow.github.models import PullRequest, PullRequestParams

__all__ = [
    "GitHubClient",
    "GitHubError",
    "PullRequest",
    "PullRequestCreationError",
    "PullRequestParams",
]
