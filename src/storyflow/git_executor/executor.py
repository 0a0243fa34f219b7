"""GitExecutor - Runs the git primitives the workflow is built from."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from storyflow.git_executor.exceptions import (
    BranchError,
    GitError,
    MergeError,
    PushError,
    TagError,
)
from storyflow.git_executor.models import ConfigScope
from storyflow.logging import sanitize_for_log

logger = logging.getLogger("storyflow.git_executor")


class GitExecutor:
    """Runs git commands against a local repository.

    Every method is a single blocking git invocation (or a short fixed
    sequence of them). Failures are wrapped into GitError subclasses that
    carry git's own output.
    """

    def __init__(self, repo_path: str | Path = ".", remote: str = "origin") -> None:
        """Initialize the git executor.

        Args:
            repo_path: Path to the local repository
            remote: Remote used for push and pull (default: origin)
        """
        self.repo_path = Path(repo_path)
        self.remote = remote

    def _run_git(self, *args: str) -> str:
        """Run a git command in the repo directory.

        Args:
            *args: Git command arguments

        Returns:
            Command stdout

        Raises:
            subprocess.CalledProcessError: If command fails
        """
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def _probe_git(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a git command whose exit code is the answer."""
        return subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=False,
        )

    @staticmethod
    def _output(error: subprocess.CalledProcessError) -> str:
        return sanitize_for_log((error.stderr or error.stdout or "").strip())

    def clean_working_tree(self) -> bool:
        """Return True when there are no uncommitted changes to tracked files."""
        try:
            status = self._run_git("status", "--porcelain", "--untracked-files=no")
        except subprocess.CalledProcessError as e:
            raise GitError(f"Failed to read working tree status: {self._output(e)}") from e
        if status:
            logger.debug("Working tree is dirty:\n%s", status)
        return not status

    def current_branch(self) -> str:
        """Return the checked out branch name.

        Raises:
            BranchError: On a detached HEAD
        """
        try:
            branch = self._run_git("branch", "--show-current")
        except subprocess.CalledProcessError as e:
            raise BranchError(f"Failed to read current branch: {self._output(e)}") from e
        if not branch:
            raise BranchError("HEAD is detached; check out a branch first")
        return branch

    def checkout(self, branch: str) -> None:
        """Check out an existing branch.

        Raises:
            BranchError: If checkout fails
        """
        logger.debug("Checking out %s", branch)
        try:
            self._run_git("checkout", "--quiet", branch)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to check out %s: %s", branch, self._output(e))
            raise BranchError(f"Failed to check out '{branch}': {self._output(e)}") from e

    def create_branch(self, name: str, start_point: str) -> None:
        """Create and check out a new branch from start_point.

        Raises:
            BranchError: If branch creation fails
        """
        logger.info("Creating branch %s from %s", name, start_point)
        try:
            self._run_git("checkout", "--quiet", "-b", name, start_point)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to create branch %s: %s", name, self._output(e))
            raise BranchError(
                f"Failed to create branch '{name}' from '{start_point}': {self._output(e)}"
            ) from e

    def delete_branch(self, name: str, force: bool = False) -> None:
        """Delete a local branch.

        Without force git refuses branches not merged into their upstream
        (or HEAD when there is none).

        Args:
            name: Branch to delete
            force: Delete even if git considers the branch unmerged (-D)

        Raises:
            BranchError: If deletion fails
        """
        logger.info("Deleting local branch %s", name)
        try:
            self._run_git("branch", "-D" if force else "-d", name)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to delete branch %s: %s", name, self._output(e))
            raise BranchError(f"Failed to delete branch '{name}': {self._output(e)}") from e

    def pull_remote(self, branch: str) -> None:
        """Fast-forward the checked out branch from its remote counterpart.

        Branches that do not exist on the remote yet are left untouched.

        Raises:
            GitError: If the pull fails
        """
        if self._probe_git("ls-remote", "--exit-code", "--heads", self.remote, branch).returncode:
            logger.debug("No remote branch %s/%s, skipping pull", self.remote, branch)
            return
        logger.debug("Pulling %s from %s", branch, self.remote)
        try:
            self._run_git("pull", "--quiet", "--ff-only", self.remote, branch)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to pull %s: %s", branch, self._output(e))
            raise GitError(
                f"Failed to pull '{branch}' from {self.remote}: {self._output(e)}"
            ) from e

    def push(self, *branches: str, set_upstream: bool = False, tags: bool = False) -> None:
        """Push branches to the remote.

        Args:
            *branches: Branch names to push
            set_upstream: Record the pushed branches as upstream (-u)
            tags: Also push annotated tags reachable from the pushed refs

        Raises:
            PushError: If push fails
        """
        args = ["push", "--quiet"]
        if set_upstream:
            args.append("-u")
        if tags:
            args.append("--follow-tags")
        args.append(self.remote)
        args.extend(branches)

        names = ", ".join(branches)
        logger.info("Pushing %s to %s", names, self.remote)
        try:
            self._run_git(*args)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to push %s: %s", names, self._output(e))
            raise PushError(f"Failed to push '{names}': {self._output(e)}") from e
        logger.info("Pushed %s", names)

    def merge(
        self,
        branch: str,
        ff: bool = False,
        no_ff: bool = False,
        message: str | None = None,
    ) -> None:
        """Merge a branch into the checked out branch.

        Args:
            branch: Branch to merge
            ff: Only allow a fast-forward (--ff-only)
            no_ff: Always create a merge commit (--no-ff)
            message: Merge commit message

        Raises:
            MergeError: If the merge fails, with git's output unmodified
        """
        if ff and no_ff:
            raise ValueError("ff and no_ff are mutually exclusive")

        args = ["merge", "--quiet"]
        if ff:
            args.append("--ff-only")
        if no_ff:
            args.append("--no-ff")
        if message:
            args.extend(["-m", message])
        args.append(branch)

        logger.info("Merging %s (%s)", branch, " ".join(args[2:-1]) or "default")
        try:
            self._run_git(*args)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to merge %s: %s", branch, self._output(e))
            raise MergeError(f"Failed to merge '{branch}': {self._output(e)}") from e

    def tag(self, name: str, annotated: bool = False, message: str | None = None) -> None:
        """Create a tag on HEAD.

        Raises:
            TagError: If tagging fails
        """
        args = ["tag"]
        if annotated:
            args.extend(["-a", name, "-m", message or name])
        else:
            args.append(name)

        logger.info("Tagging %s", name)
        try:
            self._run_git(*args)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to create tag %s: %s", name, self._output(e))
            raise TagError(f"Failed to create tag '{name}': {self._output(e)}") from e

    def is_trivial_merge(self, source: str, target: str) -> bool:
        """Return True when target can be fast-forwarded to source.

        That is the case exactly when target is an ancestor of source.

        Raises:
            GitError: If either ref cannot be resolved
        """
        result = self._probe_git("merge-base", "--is-ancestor", target, source)
        if result.returncode == 0:
            return True
        if result.returncode == 1:
            return False
        detail = sanitize_for_log(result.stderr.strip())
        raise GitError(f"Failed to compare '{source}' with '{target}': {detail}")

    def get_config(self, key: str, scope: ConfigScope = ConfigScope.INHERITED) -> str:
        """Read a git config value, returning "" when unset."""
        args = ["config"]
        if scope is not ConfigScope.INHERITED:
            args.append(f"--{scope.value}")
        args.extend(["--get", key])

        result = self._probe_git(*args)
        if result.returncode == 1:
            return ""
        if result.returncode != 0:
            detail = sanitize_for_log(result.stderr.strip())
            raise GitError(f"Failed to read config '{key}': {detail}")
        return result.stdout.strip()

    def set_config(self, key: str, value: str, scope: ConfigScope = ConfigScope.LOCAL) -> None:
        """Write a git config value."""
        if scope is ConfigScope.INHERITED:
            raise ValueError("Config can only be written to the local or global scope")
        logger.debug("Setting %s config %s", scope.value, key)
        try:
            self._run_git("config", f"--{scope.value}", key, value)
        except subprocess.CalledProcessError as e:
            raise GitError(f"Failed to write config '{key}': {self._output(e)}") from e

    def remote_url(self) -> str:
        """Return the fetch URL of the configured remote, or "" if it has none."""
        result = self._probe_git("remote", "get-url", self.remote)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()
