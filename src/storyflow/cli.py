"""CLI entry point for storyflow.

Commands map onto the story lifecycle:
- start: pick a story and create its branch
- publish: push the branch and open pull request(s)
- finish: merge the branch into its root branches
- show: print the story bound to the current branch
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from storyflow import __version__
from storyflow.config import ConfigError, Configuration
from storyflow.git_executor import GitError, GitExecutor
from storyflow.github import GitHubClient, GitHubError
from storyflow.logging import get_logger, sanitize_for_log, setup_logging
from storyflow.prompts import ClickPrompter
from storyflow.story import StoryError, print_story
from storyflow.tracker import TrackerClient, TrackerError
from storyflow.workflow import Finisher, MergeEngine, Publisher, Starter

logger = get_logger("cli")

# Error base class -> label shown to the user
ERROR_LABELS: list[tuple[type[Exception], str]] = [
    (ConfigError, "Configuration"),
    (StoryError, "Story"),
    (GitError, "Git"),
    (GitHubError, "GitHub"),
    (TrackerError, "Tracker"),
]


class Session:
    """Collaborators for one CLI invocation, created on first use."""

    def __init__(self, repo_path: Path) -> None:
        self.git = GitExecutor(repo_path)
        self.configuration = Configuration(self.git)
        self._tracker: TrackerClient | None = None
        self._github: GitHubClient | None = None

    @property
    def tracker(self) -> TrackerClient:
        if self._tracker is None:
            settings = self.configuration.tracker_settings
            self._tracker = TrackerClient(settings.project_id, settings.api_token)
        return self._tracker

    @property
    def github(self) -> GitHubClient:
        if self._github is None:
            settings = self.configuration.github_settings
            self._github = GitHubClient(settings.repository, settings.token)
        return self._github

    def close(self) -> None:
        if self._tracker is not None:
            self._tracker.close()
        if self._github is not None:
            self._github.close()


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn storyflow errors into a one-line message and exit status 1."""
    try:
        yield
    except tuple(error for error, _ in ERROR_LABELS) as e:
        label = next(label for error, label in ERROR_LABELS if isinstance(e, error))
        logger.error("%s error: %s", label, sanitize_for_log(str(e)))
        click.echo(f"{label} error: {e}", err=True)
        sys.exit(1)


pass_session = click.make_pass_decorator(Session)


@click.group()
@click.version_option(__version__)
@click.option(
    "-C",
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Repository to operate on (default: current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Echo log output to the console")
@click.pass_context
def main(ctx: click.Context, repo_path: Path, verbose: bool) -> None:
    """storyflow - Pivotal Tracker stories on a git release workflow."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)
    session = Session(repo_path)
    ctx.obj = session
    ctx.call_on_close(session.close)


@main.command()
@click.argument("filter", required=False)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Number of stories to choose from",
)
@pass_session
def start(session: Session, filter: str | None, limit: int) -> None:
    """Start a story and create its branch.

    FILTER is a story ID or a story type (feature, bug, chore, release).
    Without it, features and bugs are offered.
    """
    with reported_errors():
        conventions = session.configuration.conventions
        starter = Starter(session.git, session.tracker, conventions, ClickPrompter())
        story = starter.start(filter, limit)
        print_story(story, session.tracker.list_notes(story.id))
        click.echo(f"Switched to a new branch '{story.branch_name}'")


@main.command()
@pass_session
def publish(session: Session) -> None:
    """Push the current branch and open its pull request(s)."""
    with reported_errors():
        publisher = Publisher(session.git, session.github, session.configuration.conventions)
        result = publisher.publish(session.configuration.story(session.tracker))
        for pr in result.pull_requests:
            click.echo(f"Opened pull request #{pr.number} into {pr.base}: {pr.url}")


@main.command()
@click.option("--keep-branch", is_flag=True, help="Keep the local story branch")
@pass_session
def finish(session: Session, keep_branch: bool) -> None:
    """Merge the current branch into its root branches."""
    with reported_errors():
        conventions = session.configuration.conventions
        finisher = Finisher(session.git, session.tracker, MergeEngine(session.git, conventions))
        results = finisher.finish(session.configuration.story(session.tracker), keep_branch)
        for merge in results:
            line = f"Merged {merge.source} into {merge.target} ({merge.strategy.value})"
            if merge.tag:
                line += f", tagged {merge.tag}"
            click.echo(line)


@main.command()
@pass_session
def show(session: Session) -> None:
    """Print the story bound to the current branch."""
    with reported_errors():
        story = session.configuration.story(session.tracker)
        if story is None:
            click.echo("Could not find story associated with branch", err=True)
            sys.exit(1)
        print_story(story, session.tracker.list_notes(story.id))


if __name__ == "__main__":
    main()
