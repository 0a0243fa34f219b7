"""Configuration - Workflow conventions and credentials from git config."""

from storyflow.config.configuration import (
    KEY_DEVELOPMENT_BRANCH,
    KEY_FEATURE_PREFIX,
    KEY_GITHUB_REPOSITORY,
    KEY_GITHUB_TOKEN,
    KEY_HOTFIX_PREFIX,
    KEY_MASTER_BRANCH,
    KEY_PIVOTAL_PROJECT_ID,
    KEY_PIVOTAL_TOKEN,
    KEY_RELEASE_PREFIX,
    KEY_VALIDATION_BRANCH,
    Configuration,
    bind_story,
    parse_repository,
    story_id_key,
)
from storyflow.config.exceptions import ConfigError
from storyflow.config.models import Conventions, GitHubSettings, TrackerSettings

__all__ = [
    "KEY_DEVELOPMENT_BRANCH",
    "KEY_FEATURE_PREFIX",
    "KEY_GITHUB_REPOSITORY",
    "KEY_GITHUB_TOKEN",
    "KEY_HOTFIX_PREFIX",
    "KEY_MASTER_BRANCH",
    "KEY_PIVOTAL_PROJECT_ID",
    "KEY_PIVOTAL_TOKEN",
    "KEY_RELEASE_PREFIX",
    "KEY_VALIDATION_BRANCH",
    "ConfigError",
    "Configuration",
    "Conventions",
    "GitHubSettings",
    "TrackerSettings",
    "bind_story",
    "parse_repository",
    "story_id_key",
]
