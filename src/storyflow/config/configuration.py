"""Configuration resolved from repository git config and the environment."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from collections.abc import Mapping
from functools import cached_property
from typing import TYPE_CHECKING

from pydantic import ValidationError

from storyflow.config.exceptions import ConfigError
from storyflow.config.models import Conventions, GitHubSettings, TrackerSettings
from storyflow.git_executor import ConfigScope
from storyflow.story import UnresolvableBranchError, classify, parse_branch
from storyflow.tracker import StoryNotFoundError

if TYPE_CHECKING:
    from storyflow.git_executor import GitExecutor
    from storyflow.story import Story
    from storyflow.tracker import StoryRecord, TrackerClient

logger = logging.getLogger("storyflow.config")

KEY_DEVELOPMENT_BRANCH = "gitflow.branch.develop"
KEY_MASTER_BRANCH = "gitflow.branch.master"
KEY_VALIDATION_BRANCH = "gitflow.branch.validation"
KEY_FEATURE_PREFIX = "gitflow.prefix.feature"
KEY_HOTFIX_PREFIX = "gitflow.prefix.hotfix"
KEY_RELEASE_PREFIX = "gitflow.prefix.release"
KEY_PIVOTAL_TOKEN = "pivotal.api-token"
KEY_PIVOTAL_PROJECT_ID = "pivotal.project-id"
KEY_GITHUB_TOKEN = "github.api-token"
KEY_GITHUB_REPOSITORY = "github.repository"

# Conventions field -> git config key
CONVENTION_KEYS = {
    "development_branch": KEY_DEVELOPMENT_BRANCH,
    "master_branch": KEY_MASTER_BRANCH,
    "validation_branch": KEY_VALIDATION_BRANCH,
    "feature_prefix": KEY_FEATURE_PREFIX,
    "hotfix_prefix": KEY_HOTFIX_PREFIX,
    "release_prefix": KEY_RELEASE_PREFIX,
}

_REPOSITORY_RE = re.compile(r"[:/](?P<owner>[\w.-]+)/(?P<name>[\w.-]+?)(?:\.git)?/?$")


def story_id_key(branch: str) -> str:
    """Git config key recording the story a branch was started for."""
    return f"branch.{branch}.story-id"


def bind_story(git: GitExecutor, branch: str, story_id: int) -> None:
    """Record in local git config that branch belongs to story_id."""
    git.set_config(story_id_key(branch), str(story_id), ConfigScope.LOCAL)


def parse_repository(remote_url: str) -> str | None:
    """Extract "owner/repo" from an ssh or https remote URL."""
    match = _REPOSITORY_RE.search(remote_url.strip())
    if match is None:
        return None
    return f"{match.group('owner')}/{match.group('name')}"


def _gh_auth_token() -> str:
    """Get a GitHub token from the gh CLI, or "" when unavailable."""
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return ""


def _validation_message(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
    )


class Configuration:
    """Per-invocation view of the repository's workflow settings.

    Values are read lazily from git config (environment variables win for
    credentials) and cached for the lifetime of the object.
    """

    def __init__(self, git: GitExecutor, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the configuration.

        Args:
            git: GitExecutor for the repository being worked on.
            environ: Environment to read overrides from (default: os.environ).
        """
        self.git = git
        self.environ = os.environ if environ is None else environ

    def _get(self, key: str) -> str:
        return self.git.get_config(key, ConfigScope.INHERITED)

    @cached_property
    def conventions(self) -> Conventions:
        """Branch names and prefixes, defaulting where unset.

        Raises:
            ConfigError: If a configured value is invalid
        """
        values = {field: self._get(key) for field, key in CONVENTION_KEYS.items()}
        try:
            return Conventions(**{field: value for field, value in values.items() if value})
        except ValidationError as e:
            raise ConfigError(f"Invalid branch conventions: {_validation_message(e)}") from e

    @cached_property
    def tracker_settings(self) -> TrackerSettings:
        """Pivotal Tracker token and project.

        Raises:
            ConfigError: If either is missing or invalid
        """
        token = self.environ.get("PIVOTAL_API_TOKEN") or self._get(KEY_PIVOTAL_TOKEN)
        project_id = self.environ.get("PIVOTAL_PROJECT_ID") or self._get(KEY_PIVOTAL_PROJECT_ID)
        if not token:
            raise ConfigError(
                f"Pivotal Tracker API token not set. Run 'git config {KEY_PIVOTAL_TOKEN} <token>' "
                "or export PIVOTAL_API_TOKEN"
            )
        if not project_id:
            raise ConfigError(
                f"Pivotal Tracker project not set. Run 'git config {KEY_PIVOTAL_PROJECT_ID} <id>' "
                "or export PIVOTAL_PROJECT_ID"
            )
        try:
            return TrackerSettings(api_token=token, project_id=project_id)
        except ValidationError as e:
            raise ConfigError(f"Invalid tracker settings: {_validation_message(e)}") from e

    @cached_property
    def github_settings(self) -> GitHubSettings:
        """GitHub token and "owner/repo".

        Raises:
            ConfigError: If either is missing or invalid
        """
        token = self.environ.get("GITHUB_TOKEN") or self._get(KEY_GITHUB_TOKEN) or _gh_auth_token()
        repository = self._get(KEY_GITHUB_REPOSITORY) or parse_repository(self.git.remote_url())
        if not token:
            raise ConfigError(
                f"GitHub token not found. Export GITHUB_TOKEN, run 'git config {KEY_GITHUB_TOKEN} "
                "<token>' or log in with 'gh auth login'"
            )
        if not repository:
            raise ConfigError(
                f"GitHub repository unknown. Run 'git config {KEY_GITHUB_REPOSITORY} owner/repo'"
            )
        try:
            return GitHubSettings(token=token, repository=repository)
        except ValidationError as e:
            raise ConfigError(f"Invalid GitHub settings: {_validation_message(e)}") from e

    def story(self, tracker: TrackerClient, branch: str | None = None) -> Story | None:
        """Return the story bound to branch (default: the current branch).

        The story ID recorded when the branch was started wins; otherwise the
        branch name is parsed, and release branches are looked up by version.

        Returns:
            The story, or None if the branch cannot be mapped onto one
        """
        branch = branch or self.git.current_branch()
        try:
            record = self._find_record(tracker, branch)
        except (UnresolvableBranchError, StoryNotFoundError) as e:
            logger.info("No story for branch %s: %s", branch, e)
            return None
        if record is None:
            logger.info("No story for branch %s", branch)
            return None
        return classify(record, branch_name=branch)

    def _find_record(self, tracker: TrackerClient, branch: str) -> StoryRecord | None:
        recorded = self.git.get_config(story_id_key(branch), ConfigScope.LOCAL)
        if recorded.isdigit():
            return tracker.get_story(int(recorded))

        ref = parse_branch(branch, self.conventions)
        if ref.story_id is not None:
            return tracker.get_story(ref.story_id)

        releases = tracker.list_stories(
            story_type="release",
            current_state=(),
            limit=5,
            name=ref.version,
        )
        return releases[0] if releases else None
