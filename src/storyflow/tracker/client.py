"""TrackerClient - Interfaces with Pivotal Tracker for story management."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from storyflow.logging import sanitize_for_log
from storyflow.tracker.exceptions import StoryNotFoundError, TrackerError
from storyflow.tracker.models import Note, StoryRecord

logger = logging.getLogger("storyflow.tracker")

# States a story can be picked up from
SELECTABLE_STATES = ("rejected", "unstarted", "unscheduled")


class TrackerClient:
    """Client for the Pivotal Tracker REST API (v5).

    All calls are scoped to a single project.
    """

    def __init__(
        self,
        project_id: int,
        token: str,
        base_url: str = "https://www.pivotaltracker.com/services/v5",
    ) -> None:
        """Initialize the tracker client.

        Args:
            project_id: Pivotal Tracker project ID
            token: Pivotal Tracker API token
            base_url: API base URL (for testing)
        """
        self.project_id = project_id
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the tracker API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "X-TrackerToken": self.token,
                    "Content-Type": "application/json",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request under the project and return the decoded body.

        Raises:
            StoryNotFoundError: On 404
            TrackerError: On any other non-200 response
        """
        url = f"/projects/{self.project_id}{path}"
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TrackerError(f"Tracker request failed: {method} {url}: {e}") from e

        if response.status_code == 404:
            raise StoryNotFoundError(f"Not found in project {self.project_id}: {path}")
        if response.status_code != 200:
            detail = sanitize_for_log(response.text)
            logger.error("Tracker request failed: %s %s: %s", method, url, detail)
            raise TrackerError(
                f"Tracker request failed: {method} {url}: {response.status_code} - {detail}"
            )
        return response.json()

    @staticmethod
    def _to_record(data: dict[str, Any]) -> StoryRecord:
        return StoryRecord(
            id=int(data["id"]),
            name=data.get("name") or "",
            story_type=data.get("story_type") or "",
            description=data.get("description") or "",
            labels=[label["name"] for label in data.get("labels", [])],
            current_state=data.get("current_state") or "unstarted",
            url=data.get("url"),
        )

    def get_story(self, story_id: int) -> StoryRecord:
        """Get a story by ID.

        Raises:
            StoryNotFoundError: If the story doesn't exist
        """
        logger.debug("Fetching story #%d", story_id)
        try:
            data = self._request("GET", f"/stories/{story_id}")
        except StoryNotFoundError as e:
            raise StoryNotFoundError(
                f"Story #{story_id} not found in project {self.project_id}"
            ) from e
        return self._to_record(data)

    def list_stories(
        self,
        story_type: str | Sequence[str],
        current_state: Sequence[str] = SELECTABLE_STATES,
        limit: int = 5,
        name: str | None = None,
    ) -> list[StoryRecord]:
        """Query stories of the given type(s) and state(s).

        Args:
            story_type: One story type or several (e.g. ["feature", "bug"])
            current_state: States to match
            limit: Maximum number of stories returned
            name: Exact story name to match

        Returns:
            Matching stories in tracker order
        """
        types = [story_type] if isinstance(story_type, str) else list(story_type)
        terms = [f"type:{','.join(types)}"]
        if current_state:
            terms.append(f"state:{','.join(current_state)}")
        if name:
            terms.append(f'name:"{name}"')

        query = " ".join(terms)
        logger.debug("Querying stories: %s (limit=%d)", query, limit)
        data = self._request("GET", "/stories", params={"filter": query, "limit": limit})

        stories = [self._to_record(item) for item in data]
        if name:
            stories = [story for story in stories if story.name == name]
        logger.info("Found %d matching stories for %s", len(stories), query)
        return stories

    def list_notes(self, story_id: int) -> list[Note]:
        """List the comments on a story, oldest first."""
        data = self._request("GET", f"/stories/{story_id}/comments")
        return [
            Note(text=item.get("text") or "", noted_at=item.get("created_at") or "")
            for item in data
        ]

    def _set_state(self, story_id: int, state: str) -> None:
        logger.info("Marking story #%d as %s", story_id, state)
        self._request("PUT", f"/stories/{story_id}", json={"current_state": state})

    def start_story(self, story_id: int) -> None:
        """Mark a story as started."""
        self._set_state(story_id, "started")

    def finish_story(self, story_id: int) -> None:
        """Mark a story as finished."""
        self._set_state(story_id, "finished")

    def accept_story(self, story_id: int) -> None:
        """Mark a story as accepted.

        Chores and releases have no finished state and go straight here.
        """
        self._set_state(story_id, "accepted")
