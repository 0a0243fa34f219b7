"""Custom exceptions for the tracker client."""


class TrackerError(Exception):
    """Base exception for tracker client errors."""


class StoryNotFoundError(TrackerError):
    """Story with given ID does not exist in the project."""
