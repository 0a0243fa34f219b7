"""Data models for the git executor."""

from enum import StrEnum


class ConfigScope(StrEnum):
    """Where a git config key is read from or written to."""

    INHERITED = "inherited"  # whatever `git config --get` resolves
    LOCAL = "local"
    GLOBAL = "global"
