"""Unit tests for starting a story."""

from unittest.mock import MagicMock

import pytest

from storyflow.git_executor import ConfigScope, DirtyWorkingTreeError, GitExecutor
from storyflow.tracker import StoryRecord, TrackerClient
from storyflow.workflow import Starter


@pytest.fixture
def mock_git() -> MagicMock:
    git = MagicMock(spec=GitExecutor)
    git.clean_working_tree.return_value = True
    return git


@pytest.fixture
def mock_tracker() -> MagicMock:
    tracker = MagicMock(spec=TrackerClient)
    tracker.get_story.return_value = StoryRecord(
        id=123456, name="Sample story", story_type="feature"
    )
    return tracker


@pytest.fixture
def mock_prompter() -> MagicMock:
    prompter = MagicMock()
    prompter.ask.return_value = "sample_story"
    return prompter


@pytest.fixture
def starter(mock_git, mock_tracker, conventions, mock_prompter) -> Starter:
    return Starter(mock_git, mock_tracker, conventions, mock_prompter)


@pytest.mark.unit
class TestStart:
    """Tests for Starter.start."""

    def test_dirty_tree_stops_before_selection(self, starter, mock_git, mock_tracker) -> None:
        mock_git.clean_working_tree.return_value = False

        with pytest.raises(DirtyWorkingTreeError):
            starter.start("123456")

        mock_tracker.get_story.assert_not_called()
        mock_git.create_branch.assert_not_called()

    def test_feature_branches_from_development(self, starter, mock_git) -> None:
        story = starter.start("123456")

        mock_git.checkout.assert_called_once_with("development")
        mock_git.pull_remote.assert_called_once_with("development")
        mock_git.create_branch.assert_called_once_with(
            "feature/123456-sample_story", "development"
        )
        assert story.branch_name == "feature/123456-sample_story"

    def test_prompts_with_prefix_and_slug_default(self, starter, mock_prompter) -> None:
        starter.start("123456")

        mock_prompter.ask.assert_called_once_with(
            "Enter branch name (feature/<branch-name>): ", default="sample_story"
        )

    def test_binds_story_id_to_branch(self, starter, mock_git) -> None:
        starter.start("123456")

        mock_git.set_config.assert_called_once_with(
            "branch.feature/123456-sample_story.story-id", "123456", ConfigScope.LOCAL
        )

    def test_marks_story_started(self, starter, mock_tracker) -> None:
        starter.start("123456")

        mock_tracker.start_story.assert_called_once_with(123456)

    def test_hotfix_branches_from_validation(self, starter, mock_git, mock_tracker) -> None:
        mock_tracker.get_story.return_value = StoryRecord(
            id=123456, name="fixall", story_type="bug", labels=["hotfix"]
        )

        story = starter.start("123456")

        mock_git.create_branch.assert_called_once_with(
            "hotfix/123456-sample_story", "validation"
        )
        assert story.is_hotfix

    def test_release_is_not_prompted_or_started(
        self, starter, mock_git, mock_tracker, mock_prompter
    ) -> None:
        mock_tracker.get_story.return_value = StoryRecord(
            id=42, name="v1.5.1", story_type="release"
        )

        story = starter.start("42")

        mock_prompter.ask.assert_not_called()
        mock_git.create_branch.assert_called_once_with("release/v1.5.1", "development")
        mock_tracker.start_story.assert_not_called()
        assert story.branch_name == "release/v1.5.1"

    def test_branch_is_created_after_checkout_and_pull(self, starter, mock_git) -> None:
        starter.start("123456")

        names = [name for name, _, _ in mock_git.mock_calls]
        assert names.index("checkout") < names.index("pull_remote") < names.index("create_branch")
