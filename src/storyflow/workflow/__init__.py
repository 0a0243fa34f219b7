"""Workflow - Start, publish and finish stories on the release workflow."""

from storyflow.workflow.finish import Finisher
from storyflow.workflow.merge import MergeEngine
from storyflow.workflow.models import MergeResult, MergeState, MergeStrategy, PublishResult
from storyflow.workflow.publish import Publisher
from storyflow.workflow.start import Starter

__all__ = [
    "Finisher",
    "MergeEngine",
    "MergeResult",
    "MergeState",
    "MergeStrategy",
    "PublishResult",
    "Publisher",
    "Starter",
]
