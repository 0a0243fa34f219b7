"""Data models for the GitHub client."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PullRequestParams:
    """Everything GitHub needs to open a pull request."""

    base: str
    head: str
    title: str
    body: str

    def as_payload(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class PullRequest:
    """Pull request data."""

    id: int
    number: int
    url: str
    base: str
