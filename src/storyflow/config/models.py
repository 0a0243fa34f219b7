"""Pydantic models for storyflow configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Conventions(BaseModel):
    """Branch names and prefixes of the release workflow."""

    model_config = ConfigDict(frozen=True)

    development_branch: str = Field(default="development", min_length=1)
    master_branch: str = Field(default="master", min_length=1)
    validation_branch: str = Field(default="validation", min_length=1)
    feature_prefix: str = Field(default="feature/", min_length=1)
    hotfix_prefix: str = Field(default="hotfix/", min_length=1)
    release_prefix: str = Field(default="release/", min_length=1)

    @field_validator("feature_prefix", "hotfix_prefix", "release_prefix")
    @classmethod
    def _ensure_separator(cls, value: str) -> str:
        value = value.strip()
        if value.endswith(("/", "-", "_")):
            return value
        return f"{value}/"

    @property
    def prefixes(self) -> tuple[str, str, str]:
        return (self.feature_prefix, self.hotfix_prefix, self.release_prefix)


class TrackerSettings(BaseModel):
    """Pivotal Tracker access."""

    model_config = ConfigDict(frozen=True)

    api_token: str = Field(..., min_length=1)
    project_id: int = Field(..., gt=0)


class GitHubSettings(BaseModel):
    """GitHub access."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1)
    repository: str = Field(..., pattern=r"^[\w\-\.]+/[\w\-\.]+$")
