"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import pytest

from storyflow.config import Conventions
from storyflow.story import Category, Story


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests against real local git repositories")


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep log files written during tests out of the home directory."""
    monkeypatch.setenv("STORYFLOW_LOG_DIR", str(tmp_path_factory.mktemp("logs")))


@pytest.fixture
def conventions() -> Conventions:
    """Default branch conventions."""
    return Conventions(
        development_branch="development",
        master_branch="master",
        validation_branch="validation",
        feature_prefix="feature/",
        hotfix_prefix="hotfix/",
        release_prefix="release/",
    )


def make_story(
    category: Category = Category.FEATURE,
    labels: frozenset[str] = frozenset(),
    branch_name: str | None = None,
    story_id: int = 123456,
    title: str = "Sample story",
    description: str = "Story description",
    url: str | None = None,
) -> Story:
    """Build a Story with sensible defaults."""
    return Story(
        id=story_id,
        title=title,
        description=description,
        category=category,
        labels=labels,
        branch_name=branch_name,
        url=url,
    )


@pytest.fixture
def story_factory():
    """Factory for stories; see make_story for the defaults."""
    return make_story


@pytest.fixture
def feature_story() -> Story:
    return make_story(branch_name="feature/123456-sample_story")


@pytest.fixture
def hotfix_story() -> Story:
    return make_story(
        category=Category.BUG,
        labels=frozenset({"hotfix"}),
        branch_name="hotfix/123456-fixall",
        title="fixall",
    )


@pytest.fixture
def release_story() -> Story:
    return make_story(
        category=Category.RELEASE,
        branch_name="release/v1.5.1",
        title="v1.5.1",
        description="",
    )
