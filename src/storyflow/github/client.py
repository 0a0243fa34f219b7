"""GitHubClient - Pull request creation over the GitHub REST API."""

from __future__ import annotations

import logging

import httpx

from storyflow.github.exceptions import PullRequestCreationError
from storyflow.github.models import PullRequest, PullRequestParams
from storyflow.logging import sanitize_for_log

logger = logging.getLogger("storyflow.github")


class GitHubClient:
    """Thin client for the GitHub REST API.

    Only covers what publishing needs: opening pull requests.
    """

    def __init__(
        self,
        repo: str,
        token: str,
        base_url: str = "https://api.github.com",
    ) -> None:
        """Initialize the GitHub client.

        Args:
            repo: GitHub repo in "owner/repo" format
            token: GitHub personal access token
            base_url: GitHub API base URL (for testing/enterprise)
        """
        self.repo = repo
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def create_pull_request(self, params: PullRequestParams) -> PullRequest:
        """Create a pull request.

        Args:
            params: Base, head, title and body of the pull request

        Returns:
            PullRequest with id, number and url

        Raises:
            PullRequestCreationError: If GitHub rejects the request
        """
        logger.info("Creating PR: %s (%s -> %s)", params.title, params.head, params.base)
        try:
            response = self.client.post(f"/repos/{self.repo}/pulls", json=params.as_payload())
        except httpx.HTTPError as e:
            logger.error("Failed to reach GitHub: %s", e)
            raise PullRequestCreationError(
                f"Failed to create PR {params.head} -> {params.base}: {e}"
            ) from e

        if response.status_code != 201:
            detail = sanitize_for_log(response.text)
            logger.error("Failed to create PR: %s", detail)
            raise PullRequestCreationError(
                f"Failed to create PR {params.head} -> {params.base}: "
                f"{response.status_code} - {detail}"
            )

        data = response.json()
        pr = PullRequest(
            id=data["id"],
            number=data["number"],
            url=data["html_url"],
            base=params.base,
        )
        logger.info("Created PR #%d: %s", pr.number, pr.url)
        return pr
