"""Activity feed collaborators."""

import asyncio
from dataclasses import dataclass
from typing import Protocol

from fastfit.domain.activity import ActivityRecord

DEMO_ACTIVITIES = (
    ActivityRecord(
        name="Morning Run",
        category="Run",
        calories=450,
        duration="45 min",
        icon="figure.run",
    ),
    ActivityRecord(
        name="Lunch Ride",
        category="Ride",
        calories=320,
        duration="30 min",
        icon="bicycle",
    ),
)


class ActivityFeedClient(Protocol):
    """Interface for fetching today's workouts from a fitness feed."""

    async def fetch_activities(self) -> list[ActivityRecord]:
        """Return the activities recorded by the feed."""


@dataclass
class SimulatedActivityFeedClient(ActivityFeedClient):
    """Feed that answers with a fixed set of workouts after a delay."""

    latency_seconds: float = 1.5
    activities: tuple[ActivityRecord, ...] = DEMO_ACTIVITIES

    async def fetch_activities(self) -> list[ActivityRecord]:
        """Wait for the simulated latency and return the workouts."""
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
        return list(self.activities)
