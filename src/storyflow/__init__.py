"""storyflow - Pivotal Tracker stories mapped onto a git release workflow."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed storyflow version."""
    return __version__
