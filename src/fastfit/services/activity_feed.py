"""Connection to the external activity feed."""

import logging
from dataclasses import dataclass, field

from fastfit.adapters.activity_feed_client import ActivityFeedClient
from fastfit.domain.activity import FeedState

_logger = logging.getLogger(__name__)


@dataclass
class ActivityFeedService:
    """Publishes feed activities once a fetch completes.

    A generation counter is bumped on every disconnect so a fetch that
    finishes afterwards cannot reconnect the session.
    """

    client: ActivityFeedClient
    _state: FeedState = field(default_factory=FeedState)
    _generation: int = 0

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state.connected

    async def connect(self) -> bool:
        """Fetch activities and publish them; return whether they were applied."""
        generation = self._generation
        try:
            activities = await self.client.fetch_activities()
        except Exception:
            _logger.exception("Activity feed fetch failed")
            return False
        if generation != self._generation:
            _logger.info("Discarding activity feed result after disconnect")
            return False
        self._state = FeedState(connected=True, activities=tuple(activities))
        _logger.info("Activity feed connected: activities=%s", len(activities))
        return True

    def disconnect(self) -> None:
        self._generation += 1
        self._state = FeedState()
