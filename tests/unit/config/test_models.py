"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from storyflow.config import Conventions, GitHubSettings, TrackerSettings


@pytest.mark.unit
class TestConventions:
    """Tests for the Conventions model."""

    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            ("feature", "feature/"),
            ("feature/", "feature/"),
            ("feat-", "feat-"),
            ("feat_", "feat_"),
            (" hotfix ", "hotfix/"),
        ],
    )
    def test_prefix_separator(self, given: str, expected: str) -> None:
        assert Conventions(feature_prefix=given).feature_prefix == expected

    def test_empty_branch_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Conventions(master_branch="")

    def test_frozen(self) -> None:
        conventions = Conventions()

        with pytest.raises(ValidationError):
            conventions.master_branch = "main"


@pytest.mark.unit
class TestSettings:
    """Tests for the credential models."""

    def test_project_id_coerced(self) -> None:
        assert TrackerSettings(api_token="t", project_id="12").project_id == 12

    def test_project_id_positive(self) -> None:
        with pytest.raises(ValidationError):
            TrackerSettings(api_token="t", project_id=0)

    def test_repository_format(self) -> None:
        assert GitHubSettings(token="t", repository="owner/repo").repository == "owner/repo"
        with pytest.raises(ValidationError):
            GitHubSettings(token="t", repository="owner")
