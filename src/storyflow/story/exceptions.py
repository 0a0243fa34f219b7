"""Custom exceptions for story classification and naming."""


class StoryError(Exception):
    """Base exception for story errors."""


class InvalidCategoryError(StoryError):
    """Story type is not one of feature, bug, chore or release."""


class UnresolvableBranchError(StoryError):
    """Branch name does not map back onto a story."""


class NoAssociatedStoryError(StoryError):
    """No story is associated with the branch."""
